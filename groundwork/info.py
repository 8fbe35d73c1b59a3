"""Size formatting, clock helpers and network constants."""

from __future__ import annotations

import time

MAX_UDP_PACKET_SIZE = 65507

_UNIT = 1000
_PREFIXES = "kMGTPE"


def byte_count(size: int) -> str:
    """Format a byte count with decimal (SI) prefixes, e.g. '1.5 kB'."""
    if size < _UNIT:
        return f"{size} B"
    div, exp = _UNIT, 0
    n = size // _UNIT
    while n >= _UNIT:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{size / div:.1f} {_PREFIXES[exp]}B"


def now_in_milliseconds() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000