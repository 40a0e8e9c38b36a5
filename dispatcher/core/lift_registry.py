"""
Lift Registry

Owns the fixed set of lift cars for the lifetime of the process.
"""

from typing import Iterable, List, Optional

from .lift import Lift


class LiftRegistry:
    """
    Fixed-size collection of lifts, looked up by id.

    The registry never grows or shrinks after construction. LiftService is
    the only component that mutates the lifts it holds.
    """

    def __init__(self, lifts: Iterable[Lift]):
        """
        Args:
            lifts: Initial lifts, in listing order

        Raises:
            ValueError: If two lifts share an id
        """
        self._lifts: List[Lift] = []
        for lift in lifts:
            if self.get_by_id(lift.id) is not None:
                raise ValueError(f"Duplicate lift id: {lift.id}")
            self._lifts.append(lift)

    def get_by_id(self, lift_id: int) -> Optional[Lift]:
        """Return the lift with this id, or None if there is none"""
        for lift in self._lifts:
            if lift.id == lift_id:
                return lift
        return None

    def list(self) -> List[Lift]:
        """All lifts in registry order"""
        return list(self._lifts)

    def __len__(self) -> int:
        return len(self._lifts)

    def __repr__(self) -> str:
        return f"LiftRegistry(lifts={[lift.id for lift in self._lifts]})"
