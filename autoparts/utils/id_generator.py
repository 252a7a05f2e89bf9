"""
Time-derived identifier generator.

Identifiers are epoch milliseconds, like the ones the storefront has always
handed out, but never repeat: each call returns a value strictly greater than
the previous one and than any floor passed in.
"""
import time
from typing import Callable, Optional


class IdGenerator:
    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0

    def next_id(self, floor: int = 0) -> int:
        """
        Return a fresh identifier

        Args:
            floor: Identifiers already in use; the result is greater than this
        """
        candidate = int(self._clock() * 1000)
        candidate = max(candidate, self._last + 1, floor + 1)
        self._last = candidate
        return candidate
