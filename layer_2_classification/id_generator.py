"""
Run-unique identifiers for feedback items
"""
import itertools
import threading
import uuid
from typing import Optional


class IdGenerator:
    """Thread-safe counter with a random per-generator prefix"""

    def __init__(self, prefix: Optional[str] = None):
        self.prefix = prefix or uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            number = next(self._counter)
        return f"{self.prefix}-{number:06d}"

    __call__ = next_id
