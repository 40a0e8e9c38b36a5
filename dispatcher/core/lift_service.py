"""
Lift State Machine

Applies move / door-open / add-destination to lifts held in a LiftRegistry.
Every change to a lift's stop queue goes through _set_destinations, which
recomputes the direction in the same step.
"""

import threading
from typing import Callable, List, Optional

from .destination_queue import add_destination, remove_destination
from .direction import compute_direction
from .lift import Lift, LiftFilterCriterion
from .lift_registry import LiftRegistry
from ..actions import LiftAction, LIFT_MOVE, DOOR_OPEN, ADD_DESTINATION


class LiftService:
    """
    Mutating and read operations over the lift bank.

    The Flask server runs threaded, so all access to lift state happens
    under one lock. Each operation either applies fully or, when the lift id
    is unknown, not at all. Lifts handed back to callers are snapshots taken
    under the lock; the registry's own objects never leave this class.
    """

    def __init__(self, registry: LiftRegistry):
        self._registry = registry
        self._lock = threading.Lock()

    # --- Read paths ---

    def lift_count(self) -> int:
        return len(self._registry)

    def get_all_lifts(self) -> List[Lift]:
        with self._lock:
            return [lift.snapshot() for lift in self._registry.list()]

    def get_all_lifts_matching(self, criterion: LiftFilterCriterion) -> List[Lift]:
        """Lifts satisfying the criterion, in registry order"""
        with self._lock:
            return [lift.snapshot() for lift in self._registry.list() if criterion.matches(lift)]

    def get_lift(self, lift_id: int) -> Optional[Lift]:
        with self._lock:
            lift = self._registry.get_by_id(lift_id)
            return lift.snapshot() if lift is not None else None

    # --- Mutations ---

    def process_lift_movement(self, lift_id: int, level: int) -> bool:
        """
        Record that a lift is now at level (in transit or stopped).

        Only the position changes; the stop queue and direction are left alone.

        Returns:
            False if the lift does not exist
        """
        return self._apply(lift_id, level, self._move) is not None

    def process_door_open(self, lift_id: int, level: int) -> bool:
        """
        Record that a lift opened its doors at level, consuming that stop.

        Returns:
            False if the lift does not exist
        """
        return self._apply(lift_id, level, self._door_open) is not None

    def process_add_destination(self, lift_id: int, level: int) -> bool:
        """
        Add a stop to a lift's route, slotted in along its current path.

        Returns:
            False if the lift does not exist
        """
        return self._apply(lift_id, level, self._add_destination) is not None

    def apply_action(self, lift_id: int, action: LiftAction) -> Optional[Lift]:
        """
        Dispatch a validated action to the matching operation.

        Args:
            lift_id: Target lift
            action: Parsed action (see LiftAction.from_dict)

        Returns:
            Snapshot of the lift right after the change, or None if the lift
            does not exist
        """
        handlers = {
            LIFT_MOVE: self._move,
            DOOR_OPEN: self._door_open,
            ADD_DESTINATION: self._add_destination,
        }
        return self._apply(lift_id, action.floor, handlers[action.type])

    def _apply(self, lift_id: int, level: int, handler: Callable[[Lift, int], str]) -> Optional[Lift]:
        # Mutation and snapshot happen under the same lock acquisition
        with self._lock:
            lift = self._registry.get_by_id(lift_id)
            if lift is None:
                return None
            message = handler(lift, level)
            result = lift.snapshot()
        print(f"[LiftService] Lift {lift_id}: {message}")
        return result

    # --- Handlers (caller holds the lock) ---

    @staticmethod
    def _move(lift: Lift, level: int) -> str:
        old_level = lift.level
        lift.level = level
        return f"moved {old_level} -> {level}"

    def _door_open(self, lift: Lift, level: int) -> str:
        self._set_destinations(lift, remove_destination(lift.destinations, level))
        return f"doors open at {level}. Stops: {lift.destinations}, direction {lift.direction}"

    def _add_destination(self, lift: Lift, level: int) -> str:
        self._set_destinations(lift, add_destination(lift.destinations, lift.level, level))
        return f"destination {level} added. Stops: {lift.destinations}, direction {lift.direction}"

    @staticmethod
    def _set_destinations(lift: Lift, destinations: List[int]):
        # Queue and direction are replaced together
        lift.direction = compute_direction(lift.level, destinations, lift.direction)
        lift.destinations = destinations
