"""Pools of reusable fixed-size byte buffers."""

from __future__ import annotations

import queue
import threading
from collections import deque
from collections.abc import Callable


class PooledBuffer:
    """A buffer borrowed from a pool; release() hands it back."""

    def __init__(self, buf: bytearray, on_release: Callable[[PooledBuffer], None]) -> None:
        self.buf = buf
        self._original = buf
        self._on_release = on_release

    @property
    def payload(self) -> bytearray:
        return self.buf

    def release(self) -> None:
        """Restore the original buffer and return it to its pool."""
        self.buf = self._original
        self._on_release(self)

    def __enter__(self) -> PooledBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


def _check_sizes(pool_size: int, buf_size: int) -> None:
    if pool_size < 0:
        raise ValueError(f"pool size must not be negative, got {pool_size}")
    if buf_size < 0:
        raise ValueError(f"buffer size must not be negative, got {buf_size}")


class BufferPool:
    """Keeps up to pool_size released buffers; allocates when none is free."""

    def __init__(self, pool_size: int, buf_size: int) -> None:
        _check_sizes(pool_size, buf_size)
        self._pool_size = pool_size
        self._buf_size = buf_size
        self._free: deque[PooledBuffer] = deque()
        self._lock = threading.Lock()

    def acquire_buffer(self) -> PooledBuffer:
        with self._lock:
            if self._free:
                return self._free.popleft()
        return PooledBuffer(bytearray(self._buf_size), self._give_back)

    def _give_back(self, buffer: PooledBuffer) -> None:
        with self._lock:
            if len(self._free) < self._pool_size:
                self._free.append(buffer)


class StrictBufferPool:
    """Holds exactly pool_size buffers; acquiring blocks until one is free."""

    def __init__(self, pool_size: int, buf_size: int) -> None:
        _check_sizes(pool_size, buf_size)
        self._free: queue.Queue[PooledBuffer] = queue.Queue(maxsize=pool_size)
        for _ in range(pool_size):
            self._free.put_nowait(PooledBuffer(bytearray(buf_size), self._free.put))

    def acquire_buffer(self) -> PooledBuffer:
        return self._free.get()