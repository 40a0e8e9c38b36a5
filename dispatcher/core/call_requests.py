"""
Call Request Deduplicator

Keeps the list of pending hall calls. A (level, direction) pair is recorded
only once, like a hall button that is already lit.
"""

import threading
from typing import List

from .lift import LiftRequest


class CallRequestDeduplicator:
    """Insertion-ordered store of hall calls, unique by (level, direction)"""

    def __init__(self):
        self._requests: List[LiftRequest] = []
        self._lock = threading.Lock()

    def add(self, request: LiftRequest) -> bool:
        """
        Record a hall call.

        Args:
            request: Call to record

        Returns:
            True if newly added, False if the same (level, direction) is already pending
        """
        with self._lock:
            for existing in self._requests:
                if existing.level == request.level and existing.direction == request.direction:
                    print(f"[CallRequests] Call at floor {request.level} ({request.direction}) already pending.")
                    return False
            self._requests.append(request)
        print(f"[CallRequests] Call registered at floor {request.level} ({request.direction}).")
        return True

    def list(self) -> List[LiftRequest]:
        """All pending calls in the order they were made"""
        with self._lock:
            return list(self._requests)
