"""
Direction Calculator

Derives a lift's travel direction from its position and stop queue.
"""

from typing import Sequence

UP = "UP"
DOWN = "DOWN"
IDLE = "IDLE"

ALL_DIRECTIONS = (UP, DOWN, IDLE)
CALL_DIRECTIONS = (UP, DOWN)


def compute_direction(level: int, destinations: Sequence[int], previous_direction: str) -> str:
    """
    Compute travel direction for a lift.

    Args:
        level: Current floor of the lift
        destinations: Pending stops, nearest first
        previous_direction: Direction the lift reported before this change

    Returns:
        'IDLE' when there is nothing to do, otherwise 'UP' or 'DOWN'.
        While the lift sits on its next stop (not yet consumed by a door-open)
        the previous direction is kept.
    """
    if not destinations:
        return IDLE
    next_destination = destinations[0]
    if next_destination == level:
        return previous_direction
    if next_destination > level:
        return UP
    return DOWN
