"""A self-sizing pool of worker threads fed from a bounded work queue."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Work = Callable[[], Any]

_CLOSED = object()
_IDLE = object()
_RESTART_DELAY = 0.1


class PoolError(Exception):
    """Raised when work cannot be submitted to a pool."""


class QueueTimeoutError(PoolError, TimeoutError):
    """The work could not be queued before the timeout elapsed."""


class QueueFullError(PoolError):
    """The work queue had no room for the work."""


class PoolStoppedError(PoolError):
    """The pool has been shut down."""


@dataclass
class PoolConfig:
    """Settings for a Pool. Times are in seconds."""

    queue_size: int = 0
    min_workers: int = 0
    max_workers: int = 0
    idle_time: float = 0.0
    close_notify: threading.Event | None = None
    panic_handler: Callable[[BaseException], None] | None = None
    on_work_callback: Callable[[float], None] | None = None
    on_create: Callable[[Pool], None] | None = None

    def validate(self) -> None:
        """Raise ValueError if the worker limits are inconsistent."""
        if self.max_workers < 1:
            raise ValueError("max workers must be at least 1")
        if self.min_workers > self.max_workers:
            raise ValueError(
                "min workers must be less than or equal to max workers. "
                f"min workers={self.min_workers}, max workers={self.max_workers}"
            )


class Pool:
    """Worker threads that grow while the queue is busy and retire when idle.

    The pool starts with ``min_workers`` threads, adds more (up to
    ``max_workers``) while queued work is waiting, and lets threads beyond the
    minimum exit after being idle for ``idle_time`` seconds.
    """

    def __init__(self, config: PoolConfig) -> None:
        config.validate()
        self._capacity = config.queue_size
        self._min_workers = config.min_workers
        self._max_workers = config.max_workers
        self._idle_time = config.idle_time
        self._external_close = config.close_notify
        self._panic_handler = config.panic_handler
        self._on_work_callback = config.on_work_callback
        self._closed = threading.Event()

        self._cond = threading.Condition()
        self._items: deque[Work] = deque()
        self._waiting = 0

        self._count_lock = threading.Lock()
        self._count = 0
        self._busy = 0

        if self._external_close is not None:
            threading.Thread(target=self._watch_external_close, daemon=True).start()
        if config.on_create is not None:
            config.on_create(self)
        while self.worker_count() < self._min_workers:
            self._try_add_worker()

    def __enter__(self) -> Pool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def queue(self, work: Work) -> None:
        """Submit work, blocking until there is room; raise if the pool stopped."""
        self._queue_blocking(work, None)

    def queue_with_timeout(self, work: Work, timeout: float) -> None:
        """Submit work, waiting at most timeout seconds for room."""
        self._queue_blocking(work, timeout)

    def queue_or_error(self, work: Work) -> None:
        """Submit work only if there is room right now."""
        self._put(work, block=False, timeout=None)
        self._ensure_no_starvation()

    def worker_count(self) -> int:
        with self._count_lock:
            return self._count

    def queue_size(self) -> int:
        with self._cond:
            return len(self._items)

    def busy_workers(self) -> int:
        with self._count_lock:
            return self._busy

    def shutdown(self) -> None:
        """Stop workers as they finish and refuse new work."""
        self._closed.set()
        with self._cond:
            self._cond.notify_all()

    def _queue_blocking(self, work: Work, timeout: float | None) -> None:
        self._ensure_no_starvation()
        self._put(work, block=True, timeout=timeout)
        self._ensure_no_starvation()

    def _watch_external_close(self) -> None:
        assert self._external_close is not None
        while not self._external_close.wait(_RESTART_DELAY):
            if self._closed.is_set():
                return
        with self._cond:
            self._cond.notify_all()

    def _stopped_error(self) -> PoolStoppedError | None:
        if self._closed.is_set():
            return PoolStoppedError("cannot queue: pool shutdown")
        if self._external_close is not None and self._external_close.is_set():
            return PoolStoppedError("cannot queue, pool stopped externally: pool shutdown")
        return None

    def _is_stopped(self) -> bool:
        return self._closed.is_set() or (
            self._external_close is not None and self._external_close.is_set()
        )

    def _put(self, work: Work, *, block: bool, timeout: float | None) -> None:
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while True:
                error = self._stopped_error()
                if error is not None:
                    raise error
                if len(self._items) < self._capacity + self._waiting:
                    self._items.append(work)
                    self._cond.notify_all()
                    return
                if not block:
                    raise QueueFullError("cannot queue: queue full")
                if deadline is None:
                    self._cond.wait()
                else:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise QueueTimeoutError("cannot queue: timed out")
                    self._cond.wait(remaining)

    def _take(self, timeout: float) -> Any:
        deadline = time.monotonic() + timeout
        with self._cond:
            self._waiting += 1
            self._cond.notify_all()
            try:
                while True:
                    if self._is_stopped():
                        return _CLOSED
                    if self._items:
                        work = self._items.popleft()
                        self._cond.notify_all()
                        return work
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        return _IDLE
                    self._cond.wait(remaining)
            finally:
                self._waiting -= 1

    def _take_nowait(self) -> Work | None:
        with self._cond:
            if not self._items:
                return None
            work = self._items.popleft()
            self._cond.notify_all()
            return work

    def _ensure_no_starvation(self) -> None:
        if self._min_workers == 0 and self.worker_count() == 0:
            self._try_add_worker()

    def _reserve_worker(self) -> bool:
        with self._count_lock:
            if self._count >= self._max_workers:
                return False
            self._count += 1
            return True

    def _decrement_count(self) -> int:
        with self._count_lock:
            self._count -= 1
            return self._count

    def _try_retire(self) -> int | None:
        with self._count_lock:
            if self._count > self._min_workers:
                self._count -= 1
                return self._count
        return None

    def _try_add_worker(self) -> None:
        if self._reserve_worker():
            self._spawn(None)

    def _start_extra_worker_if_queue_busy(self) -> None:
        if not self._reserve_worker():
            return
        work = self._take_nowait()
        if work is None:
            self._decrement_count()
            return
        self._spawn(work)

    def _spawn(self, initial: Work | None) -> None:
        threading.Thread(target=self._worker, args=(initial,), daemon=True).start()

    def _worker(self, initial: Work | None) -> None:
        try:
            remaining = self._serve(initial)
        except Exception as err:
            self._worker_exited(None)
            if self._panic_handler is not None:
                self._panic_handler(err)
            else:
                print(f"panic during pool worker executing ({err!r})")
            self._try_add_worker()
        else:
            self._worker_exited(remaining)

    def _serve(self, initial: Work | None) -> int | None:
        if initial is not None:
            self._run_work(initial)
        while True:
            work = self._take(self._idle_time)
            if work is _CLOSED:
                return None
            if work is _IDLE:
                remaining = self._try_retire()
                if remaining is not None:
                    return remaining
                continue
            self._start_extra_worker_if_queue_busy()
            self._run_work(work)

    def _worker_exited(self, remaining: int | None) -> None:
        if remaining is None:
            remaining = self._decrement_count()
        if remaining == 0:
            # The last worker may leave just as work arrives; look again shortly.
            timer = threading.Timer(_RESTART_DELAY, self._start_extra_worker_if_queue_busy)
            timer.daemon = True
            timer.start()

    def _run_work(self, work: Work) -> None:
        with self._count_lock:
            self._busy += 1
        try:
            if self._on_work_callback is None:
                work()
            else:
                start = time.monotonic()
                work()
                self._on_work_callback(time.monotonic() - start)
        finally:
            with self._count_lock:
                self._busy -= 1