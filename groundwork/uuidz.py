"""Formatting of raw UUID bytes."""

from __future__ import annotations

import uuid as _uuid


def to_string(uuid: bytes) -> str:
    """Return the canonical hyphenated form of 16 UUID bytes."""
    if len(uuid) != 16:
        return f"invalid-uuid-size-of-{len(uuid)}-bytes"
    return str(_uuid.UUID(bytes=bytes(uuid)))