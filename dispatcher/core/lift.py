"""
Lift data model

Lift cars, hall call requests, and the filter criterion used to search lifts.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from .direction import IDLE, CALL_DIRECTIONS
from .floors import is_valid_level
from ..errors import InvalidCallRequestError, InvalidQueryError

# Plain ASCII signed integer; rejects "1_2", " 5 " and non-ASCII digits that int() accepts
INTEGER_PATTERN = re.compile(r"[-+]?[0-9]+")


@dataclass
class Lift:
    """
    One elevator car.

    Attributes:
        id: Identifier, unique within the registry
        level: Current floor
        direction: 'UP', 'DOWN' or 'IDLE'; derived from destinations by LiftService
        destinations: Pending stops, nearest first, no duplicates
    """
    id: int
    level: int
    direction: str = IDLE
    destinations: List[int] = field(default_factory=list)

    def snapshot(self) -> 'Lift':
        """Detached copy; changing it does not touch the original"""
        return replace(self, destinations=list(self.destinations))

    def to_dict(self) -> Dict[str, Any]:
        """Full representation (single-lift responses)"""
        return {
            'id': self.id,
            'level': self.level,
            'direction': self.direction,
            'destinations': list(self.destinations),
        }

    def to_small_dict(self) -> Dict[str, Any]:
        """Short representation (lift listings)"""
        return {'id': self.id, 'level': self.level}


@dataclass(frozen=True)
class LiftRequest:
    """Hall call: someone pressed the UP/DOWN button at a floor"""
    level: int
    direction: str

    @classmethod
    def from_dict(cls, data) -> 'LiftRequest':
        """
        Create LiftRequest from a JSON payload

        Raises:
            InvalidCallRequestError: If level is not a legal floor or
                direction is not 'UP'/'DOWN'
        """
        if not isinstance(data, Mapping):
            raise InvalidCallRequestError("call request must be a JSON object")
        level = data.get('level')
        direction = data.get('direction')
        if not is_valid_level(level):
            raise InvalidCallRequestError(f"invalid level: {level!r}")
        if direction not in CALL_DIRECTIONS:
            raise InvalidCallRequestError(f"invalid direction: {direction!r}")
        return cls(level=int(level), direction=direction)

    def to_dict(self) -> Dict[str, Any]:
        return {'level': self.level, 'direction': self.direction}


@dataclass
class LiftFilterCriterion:
    """
    Search criterion for lifts. Every field is optional; unset fields
    do not constrain the result.
    """
    floor: Optional[int] = None
    min_floor: Optional[int] = None
    max_floor: Optional[int] = None
    direction: Optional[str] = None

    @classmethod
    def from_query(cls, args: Mapping[str, str]) -> 'LiftFilterCriterion':
        """
        Build a criterion from URL query parameters (all strings)

        Raises:
            InvalidQueryError: If a floor parameter is not an integer
        """
        criterion = cls()
        for name in ('floor', 'min_floor', 'max_floor'):
            raw = args.get(name)
            if raw is None:
                continue
            if not isinstance(raw, str) or not INTEGER_PATTERN.fullmatch(raw):
                raise InvalidQueryError(f"{name} must be an integer, got {raw!r}")
            setattr(criterion, name, int(raw))
        if args.get('direction') is not None:
            criterion.direction = args.get('direction')
        return criterion

    def matches(self, lift: Lift) -> bool:
        """Check whether a lift satisfies every set field (bounds are inclusive)"""
        if self.floor is not None and lift.level != self.floor:
            return False
        if self.min_floor is not None and lift.level < self.min_floor:
            return False
        if self.max_floor is not None and lift.level > self.max_floor:
            return False
        if self.direction is not None and lift.direction != self.direction:
            return False
        return True
