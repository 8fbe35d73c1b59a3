"""Queues that hand out items in the order of their sequence numbers."""

from __future__ import annotations

import heapq
import threading
import time
from collections import deque
from typing import Any

_UINT32_MASK = 0xFFFFFFFF


class SequencerClosedError(Exception):
    """The sequencer has been closed."""

    def __init__(self, message: str = "sequencer closed") -> None:
        super().__init__(message)


class SequencerTimeoutError(TimeoutError):
    """The deadline passed before an item was available."""

    def __init__(self, message: str = "operation timed out") -> None:
        super().__init__(message)


class _Channel:
    """A bounded, closable FIFO; capacity 0 means a hand-off to a waiting reader."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: deque[Any] = deque()
        self._waiting = 0
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def put(self, value: Any) -> None:
        with self._cond:
            while True:
                if self._closed:
                    raise SequencerClosedError()
                if len(self._items) < self._capacity + self._waiting:
                    self._items.append(value)
                    self._cond.notify_all()
                    return
                self._cond.wait()

    def get(self, deadline: float | None) -> tuple[bool, Any]:
        """Return (True, item), or (False, None) once closed and drained."""
        with self._cond:
            self._waiting += 1
            self._cond.notify_all()
            try:
                while True:
                    if self._items:
                        value = self._items.popleft()
                        self._cond.notify_all()
                        return True, value
                    if self._closed:
                        return False, None
                    if deadline is None:
                        self._cond.wait()
                    else:
                        remaining = deadline - time.monotonic()
                        if remaining <= 0:
                            raise SequencerTimeoutError()
                        self._cond.wait(remaining)
            finally:
                self._waiting -= 1


class _ChannelSequencer:
    def __init__(self, buffer_size: int) -> None:
        self._channel = _Channel(buffer_size)

    def get_next(self) -> Any:
        """Block for the next item; return None once closed and drained."""
        found, value = self._channel.get(None)
        return value if found else None

    def get_next_with_deadline(self, deadline: float | None) -> Any:
        """Return the next item, waiting until deadline (a time.monotonic() value).

        A deadline of None waits without limit. Raises SequencerClosedError once
        closed and drained, SequencerTimeoutError when the deadline passes.
        """
        if deadline is None:
            result = self.get_next()
            if result is None:
                raise SequencerClosedError()
            return result
        found, value = self._channel.get(deadline)
        if not found:
            raise SequencerClosedError()
        return value

    def close(self) -> None:
        """Stop producers; readers still receive items already buffered."""
        self._channel.close()


class NoopSequencer(_ChannelSequencer):
    """Passes items through in arrival order, ignoring their sequence numbers."""

    def __init__(self, channel_depth: int) -> None:
        super().__init__(channel_depth)

    def put_sequenced(self, seq: int, value: Any) -> None:
        self._channel.put(value)

    def get_next(self) -> Any:
        return super().get_next()

    def get_next_with_deadline(self, deadline: float | None) -> Any:
        return super().get_next_with_deadline(deadline)

    def close(self) -> None:
        super().close()


class SingleWriterSequencer(_ChannelSequencer):
    """Releases items in sequence order starting at 1, holding early arrivals.

    Only one thread may call put_sequenced; any number may read.
    """

    def __init__(self, max_out_of_order: int, buffer_size: int = 16) -> None:
        super().__init__(buffer_size)
        self._max_out_of_order = max_out_of_order
        self._pending: dict[int, Any] = {}
        self._pending_keys: list[int] = []
        self._next_seq = 1

    def put_sequenced(self, seq: int, value: Any) -> None:
        """Add an item; raise OverflowError if too many are held out of order."""
        if self._channel.closed:
            raise SequencerClosedError()
        if seq == self._next_seq:
            self._enqueue(value)
            while self._pending_keys and self._pending_keys[0] == self._next_seq:
                key = heapq.heappop(self._pending_keys)
                self._enqueue(self._pending.pop(key))
        elif len(self._pending) < self._max_out_of_order:
            if seq not in self._pending:
                heapq.heappush(self._pending_keys, seq)
            self._pending[seq] = value
        else:
            raise OverflowError(
                f"exceeded max out of order entries: {self._max_out_of_order}"
            )

    def _enqueue(self, value: Any) -> None:
        self._channel.put(value)
        self._next_seq = (self._next_seq + 1) & _UINT32_MASK

    def get_next(self) -> Any:
        return super().get_next()

    def get_next_with_deadline(self, deadline: float | None) -> Any:
        return super().get_next_with_deadline(deadline)

    def close(self) -> None:
        super().close()