"""
Lift Dispatcher - Core dispatch logic for a small lift bank

Tracks each lift's position, direction and stop queue, and the list of
pending hall calls. Has no dependency on the HTTP layer.
"""

__version__ = "0.1.0"

from .core.lift import Lift, LiftRequest, LiftFilterCriterion
from .core.lift_registry import LiftRegistry
from .core.lift_service import LiftService
from .core.call_requests import CallRequestDeduplicator
from .actions import LiftAction
from .errors import InvalidActionError, InvalidQueryError, InvalidCallRequestError

__all__ = [
    'Lift',
    'LiftRequest',
    'LiftFilterCriterion',
    'LiftRegistry',
    'LiftService',
    'CallRequestDeduplicator',
    'LiftAction',
    'InvalidActionError',
    'InvalidQueryError',
    'InvalidCallRequestError',
]
