"""
Lift actions

Parses the action payload posted to a single lift:

    {"type": "lift-move", "level": 7}
    {"type": "door-open", "level": 7}
    {"type": "add-destination", "destination": 12}
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .core.floors import is_valid_level
from .errors import InvalidActionError

LIFT_MOVE = "lift-move"
DOOR_OPEN = "door-open"
ADD_DESTINATION = "add-destination"

# Action type -> payload field holding the floor
ACTION_LEVEL_FIELDS = {
    LIFT_MOVE: 'level',
    DOOR_OPEN: 'level',
    ADD_DESTINATION: 'destination',
}


@dataclass(frozen=True)
class LiftAction:
    """
    A validated action for one lift

    Construction checks the type and the floor field that type uses, so an
    instance always names a known action and a legal floor.

    Raises:
        InvalidActionError: If the type is unknown or its floor is not legal
    """
    type: str
    level: Optional[int] = None
    destination: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.type, str) or self.type not in ACTION_LEVEL_FIELDS:
            raise InvalidActionError(f"unknown action type: {self.type!r}")
        field_name = ACTION_LEVEL_FIELDS[self.type]
        value = getattr(self, field_name)
        if not is_valid_level(value):
            raise InvalidActionError(f"{self.type}: invalid {field_name} {value!r}")
        # JSON may carry 7.0 for floor 7
        object.__setattr__(self, field_name, int(value))

    @property
    def floor(self) -> int:
        """The floor this action refers to, whichever field carries it"""
        return self.destination if self.type == ADD_DESTINATION else self.level

    @classmethod
    def from_dict(cls, data) -> 'LiftAction':
        """
        Create LiftAction from a JSON payload

        Raises:
            InvalidActionError: If the payload is not an object, the type is
                unknown, or the floor for that type is not a legal level
        """
        if not isinstance(data, Mapping):
            raise InvalidActionError("action must be a JSON object")
        action_type = data.get('type')
        if not isinstance(action_type, str) or action_type not in ACTION_LEVEL_FIELDS:
            raise InvalidActionError(f"unknown action type: {action_type!r}")
        field_name = ACTION_LEVEL_FIELDS[action_type]
        return cls(type=action_type, **{field_name: data.get(field_name)})

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, ACTION_LEVEL_FIELDS[self.type]: self.floor}
