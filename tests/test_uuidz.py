import uuid

import pytest

from groundwork import uuidz


def test_known_value():
    assert uuidz.to_string(bytes(range(16))) == "00010203-0405-0607-0809-0a0b0c0d0e0f"


def test_round_trip():
    raw = uuid.uuid4().bytes
    text = uuidz.to_string(raw)
    assert uuid.UUID(text).bytes == raw
    assert text == text.lower()
    assert [len(part) for part in text.split("-")] == [8, 4, 4, 4, 12]


def test_accepts_bytearray():
    raw = uuid.uuid4().bytes
    assert uuidz.to_string(bytearray(raw)) == uuidz.to_string(raw)


@pytest.mark.parametrize("size", [0, 3, 15, 17])
def test_invalid_size(size):
    assert uuidz.to_string(b"\x00" * size) == f"invalid-uuid-size-of-{size}-bytes"