"""A counting semaphore that starts full and refuses releases beyond its size."""

from __future__ import annotations

import threading
import time


class Semaphore:
    """Bounded semaphore holding at most ``size`` permits, initially all available."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"semaphore size must not be negative, got {size}")
        self._size = size
        self._available = size
        self._cond = threading.Condition()

    def acquire(self) -> None:
        """Block until a permit is available and take it."""
        with self._cond:
            while self._available == 0:
                self._cond.wait()
            self._available -= 1

    def acquire_with_timeout(self, timeout: float) -> bool:
        """Take a permit, waiting at most timeout seconds; return success."""
        deadline = time.monotonic() + timeout
        with self._cond:
            while self._available == 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._cond.wait(remaining)
            self._available -= 1
            return True

    def try_acquire(self) -> bool:
        """Take a permit if one is free right now."""
        with self._cond:
            if self._available == 0:
                return False
            self._available -= 1
            return True

    def release(self) -> bool:
        """Return a permit; False if the semaphore is already full."""
        with self._cond:
            if self._available >= self._size:
                return False
            self._available += 1
            self._cond.notify()
            return True