import threading
import time

import pytest

from groundwork.pool import (
    Pool,
    PoolConfig,
    PoolError,
    PoolStoppedError,
    QueueFullError,
    QueueTimeoutError,
)


def wait_until(condition, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


def test_validate_rejects_zero_max_workers():
    with pytest.raises(ValueError, match="max workers must be at least 1"):
        PoolConfig(max_workers=0).validate()


def test_validate_rejects_min_above_max():
    with pytest.raises(ValueError, match="min workers=3, max workers=2"):
        Pool(PoolConfig(min_workers=3, max_workers=2))


def test_pool_starts_with_min_workers():
    pool = Pool(PoolConfig(queue_size=10, min_workers=2, max_workers=10, idle_time=0.1))
    try:
        assert pool.worker_count() == 2
        assert pool.queue_size() == 0
        assert pool.busy_workers() == 0
    finally:
        pool.shutdown()


def test_on_create_called_before_workers_start():
    seen = []
    pool = Pool(
        PoolConfig(
            min_workers=1,
            max_workers=1,
            idle_time=0.1,
            on_create=lambda p: seen.append((p, p.worker_count())),
        )
    )
    try:
        assert seen == [(pool, 0)]
        assert pool.worker_count() == 1
    finally:
        pool.shutdown()


def test_pool_grows_to_max_and_shrinks_back_to_min():
    pool = Pool(
        PoolConfig(
            queue_size=100,
            min_workers=2,
            max_workers=10,
            idle_time=0.1,
            panic_handler=lambda err: None,
        )
    )
    lock = threading.Lock()
    peaks = {"workers": 0, "busy": 0}
    done = []

    def task():
        with lock:
            peaks["workers"] = max(peaks["workers"], pool.worker_count())
            peaks["busy"] = max(peaks["busy"], pool.busy_workers())
        time.sleep(0.005)
        with lock:
            done.append(1)

    try:
        for _ in range(400):
            pool.queue(task)
        assert wait_until(lambda: len(done) == 400, 10)
        assert peaks["workers"] == 10
        assert 2 < peaks["busy"] <= 10
        assert wait_until(lambda: pool.worker_count() == 2, 3)
        time.sleep(0.3)
        assert pool.worker_count() == 2
    finally:
        pool.shutdown()


def test_queue_or_error_reports_full_queue():
    pool = Pool(PoolConfig(queue_size=1, min_workers=1, max_workers=1, idle_time=0.1))
    running = threading.Event()
    release = threading.Event()

    def blocker():
        running.set()
        release.wait(2)

    try:
        pool.queue_or_error(blocker)
        assert running.wait(1)
        pool.queue_or_error(lambda: None)
        assert pool.queue_size() == 1
        with pytest.raises(QueueFullError, match="queue full"):
            pool.queue_or_error(lambda: None)
    finally:
        release.set()
        pool.shutdown()


def test_queue_with_timeout_times_out_when_full():
    pool = Pool(PoolConfig(queue_size=1, min_workers=1, max_workers=1, idle_time=0.1))
    running = threading.Event()
    release = threading.Event()

    def blocker():
        running.set()
        release.wait(2)

    try:
        pool.queue(blocker)
        assert running.wait(1)
        pool.queue(lambda: None)
        start = time.monotonic()
        with pytest.raises(QueueTimeoutError) as info:
            pool.queue_with_timeout(lambda: None, 0.05)
        assert time.monotonic() - start >= 0.04
        assert isinstance(info.value, PoolError)
        assert str(info.value) == "cannot queue: timed out"
    finally:
        release.set()
        pool.shutdown()


def test_queue_after_shutdown_raises_and_workers_exit():
    pool = Pool(PoolConfig(queue_size=5, min_workers=2, max_workers=4, idle_time=0.1))
    pool.shutdown()
    pool.shutdown()
    with pytest.raises(PoolStoppedError, match="pool shutdown"):
        pool.queue(lambda: None)
    with pytest.raises(PoolStoppedError):
        pool.queue_or_error(lambda: None)
    assert wait_until(lambda: pool.worker_count() == 0)


def test_shutdown_wakes_blocked_submitter():
    pool = Pool(PoolConfig(queue_size=0, min_workers=1, max_workers=1, idle_time=0.1))
    running = threading.Event()
    release = threading.Event()

    def blocker():
        running.set()
        release.wait(2)

    pool.queue(blocker)
    assert running.wait(1)
    timer = threading.Timer(0.05, pool.shutdown)
    timer.start()
    try:
        start = time.monotonic()
        with pytest.raises(PoolStoppedError, match="pool shutdown"):
            pool.queue(lambda: None)
        assert time.monotonic() - start < 2
    finally:
        timer.join(2)
        release.set()
        pool.shutdown()


def test_external_close_stops_pool():
    stop = threading.Event()
    pool = Pool(
        PoolConfig(queue_size=5, min_workers=1, max_workers=2, idle_time=0.1, close_notify=stop)
    )
    stop.set()
    with pytest.raises(PoolStoppedError, match="externally"):
        pool.queue(lambda: None)
    assert wait_until(lambda: pool.worker_count() == 0)
    pool.shutdown()


def test_panic_handler_receives_error_and_worker_is_replaced():
    errors = []
    done = threading.Event()
    pool = Pool(
        PoolConfig(
            queue_size=5,
            min_workers=1,
            max_workers=1,
            idle_time=0.1,
            panic_handler=errors.append,
        )
    )

    def explode():
        raise RuntimeError("boom")

    try:
        pool.queue(explode)
        pool.queue(done.set)
        assert done.wait(2)
        assert [str(e) for e in errors] == ["boom"]
        assert wait_until(lambda: pool.worker_count() == 1)
        assert pool.busy_workers() == 0
    finally:
        pool.shutdown()


def test_zero_min_workers_starts_worker_on_demand():
    done = threading.Event()
    pool = Pool(PoolConfig(queue_size=0, min_workers=0, max_workers=2, idle_time=0.1))
    try:
        assert pool.worker_count() == 0
        pool.queue(done.set)
        assert done.wait(2)
        assert wait_until(lambda: pool.worker_count() == 0, 3)
    finally:
        pool.shutdown()


def test_on_work_callback_reports_duration():
    durations = []
    pool = Pool(
        PoolConfig(
            queue_size=5,
            min_workers=1,
            max_workers=1,
            idle_time=0.1,
            on_work_callback=durations.append,
        )
    )
    try:
        pool.queue(lambda: time.sleep(0.03))
        assert wait_until(lambda: len(durations) == 1)
        assert durations[0] >= 0.01
    finally:
        pool.shutdown()


def test_context_manager_shuts_down():
    with Pool(PoolConfig(queue_size=1, min_workers=1, max_workers=1, idle_time=0.1)) as pool:
        assert pool.worker_count() == 1
    with pytest.raises(PoolStoppedError):
        pool.queue(lambda: None)