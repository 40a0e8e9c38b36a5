"""
Destination Queue Manager

The queue is a travel route, not a sorted list: each consecutive pair of stops
(and the pair current level -> first stop) is a straight segment of travel.
New stops are slotted into the first segment that passes them, so a request
"on the way" is served without reversing direction. Anything else extends
the route.

Both functions are pure and return a new list; callers store the result.
"""

from typing import List, Sequence


def _is_between(x: int, a: int, b: int) -> bool:
    """Strictly between a and b, in either order"""
    return min(a, b) < x < max(a, b)


def add_destination(destinations: Sequence[int], current_level: int, new_level: int) -> List[int]:
    """
    Insert a new stop into a route.

    Args:
        destinations: Current route, nearest stop first
        current_level: Floor the lift is at (origin of the first segment)
        new_level: Floor to add

    Returns:
        New route containing new_level exactly once

    Example:
        >>> add_destination([10, 20], 5, 15)
        [10, 15, 20]
        >>> add_destination([10, 20], 5, 7)
        [7, 10, 20]
        >>> add_destination([10, 20], 5, 25)
        [10, 20, 25]
    """
    route = list(destinations)

    if new_level in route:
        return route
    if not route:
        return [new_level]

    if _is_between(new_level, current_level, route[0]):
        return [new_level] + route

    for i in range(len(route) - 1):
        if _is_between(new_level, route[i], route[i + 1]):
            return route[:i + 1] + [new_level] + route[i + 1:]

    return route + [new_level]


def remove_destination(destinations: Sequence[int], level: int) -> List[int]:
    """Return the route without any stop at level"""
    return [d for d in destinations if d != level]
