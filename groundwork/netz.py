"""Waiting for TCP ports to open or close."""

from __future__ import annotations

import socket
import time

_RETRY_DELAY = 0.01


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address}")
    host = host.strip("[]") or "localhost"
    return host, int(port)


def _connect(host: str, port: int, max_wait: float) -> socket.socket:
    return socket.create_connection((host, port), timeout=max_wait if max_wait > 0 else None)


def wait_for_port_active(address: str, duration: float) -> None:
    """Wait up to duration seconds until a TCP connection to address succeeds.

    Raises the last connection error if the port never accepted.
    """
    host, port = _split_address(address)
    end = time.monotonic() + duration
    max_wait = duration
    while True:
        try:
            conn = _connect(host, port, max_wait)
        except OSError:
            now = time.monotonic()
            if now >= end:
                raise
            max_wait = end - now
            time.sleep(_RETRY_DELAY)
        else:
            conn.close()
            return


def wait_for_port_gone(address: str, duration: float) -> bool:
    """Wait up to duration seconds until connections to address fail.

    Returns True once the port is gone, False if it still accepts at the deadline.
    """
    host, port = _split_address(address)
    end = time.monotonic() + duration
    max_wait = duration
    while True:
        try:
            conn = _connect(host, port, max_wait)
        except OSError:
            return True
        conn.close()
        now = time.monotonic()
        if now >= end:
            return False
        max_wait = end - now
        time.sleep(_RETRY_DELAY)