"""Core dispatch logic: floors, directions, stop queues and lift state"""

from .floors import ALL_LEVELS, is_valid_level
from .direction import UP, DOWN, IDLE, compute_direction
from .destination_queue import add_destination, remove_destination
from .lift import Lift, LiftRequest, LiftFilterCriterion
from .lift_registry import LiftRegistry
from .lift_service import LiftService
from .call_requests import CallRequestDeduplicator

__all__ = [
    'ALL_LEVELS',
    'is_valid_level',
    'UP',
    'DOWN',
    'IDLE',
    'compute_direction',
    'add_destination',
    'remove_destination',
    'Lift',
    'LiftRequest',
    'LiftFilterCriterion',
    'LiftRegistry',
    'LiftService',
    'CallRequestDeduplicator',
]
