import threading

import pytest

from groundwork.mempool import BufferPool, StrictBufferPool


def test_buffer_has_requested_size():
    pool = BufferPool(2, 16)
    buffer = pool.acquire_buffer()
    assert len(buffer.payload) == 16
    assert buffer.payload is buffer.buf


def test_released_buffer_is_reused():
    pool = BufferPool(2, 8)
    first = pool.acquire_buffer()
    second = pool.acquire_buffer()
    assert first is not second
    first.release()
    assert pool.acquire_buffer() is first


def test_release_restores_original_buffer():
    pool = BufferPool(1, 8)
    buffer = pool.acquire_buffer()
    original = buffer.buf
    buffer.buf = buffer.buf[:3]
    buffer.release()
    again = pool.acquire_buffer()
    assert again.buf is original
    assert len(again.payload) == 8


def test_pool_keeps_at_most_pool_size():
    pool = BufferPool(1, 4)
    a = pool.acquire_buffer()
    b = pool.acquire_buffer()
    a.release()
    b.release()
    assert pool.acquire_buffer() is a
    fresh = pool.acquire_buffer()
    assert fresh is not a and fresh is not b


def test_zero_size_pool_never_reuses():
    pool = BufferPool(0, 4)
    buffer = pool.acquire_buffer()
    buffer.release()
    assert pool.acquire_buffer() is not buffer


def test_context_manager_releases():
    pool = BufferPool(1, 4)
    with pool.acquire_buffer() as buffer:
        buffer.buf = bytearray(1)
    again = pool.acquire_buffer()
    assert again is buffer
    assert len(again.buf) == 4


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        BufferPool(-1, 4)
    with pytest.raises(ValueError):
        StrictBufferPool(1, -4)


def test_strict_pool_hands_out_distinct_buffers():
    pool = StrictBufferPool(3, 5)
    buffers = [pool.acquire_buffer() for _ in range(3)]
    assert len({id(b) for b in buffers}) == 3
    assert all(len(b.payload) == 5 for b in buffers)


def test_strict_pool_blocks_until_release():
    pool = StrictBufferPool(1, 4)
    held = pool.acquire_buffer()
    received = []
    done = threading.Event()

    def take():
        received.append(pool.acquire_buffer())
        done.set()

    thread = threading.Thread(target=take, daemon=True)
    thread.start()
    assert not done.wait(0.1)
    held.buf = bytearray(1)
    held.release()
    assert done.wait(2.0)
    thread.join(2.0)
    assert received == [held]
    assert len(received[0].buf) == 4