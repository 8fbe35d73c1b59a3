import time

import pytest

from groundwork.info import MAX_UDP_PACKET_SIZE, byte_count, now_in_milliseconds


@pytest.mark.parametrize("size", [0, 1, 512, 999])
def test_small_sizes_are_plain_bytes(size):
    assert byte_count(size) == f"{size} B"


def test_negative_size_is_plain_bytes():
    assert byte_count(-5) == "-5 B"


def test_kilobytes():
    assert byte_count(1000) == "1.0 kB"


def test_megabytes():
    assert byte_count(2_500_000) == "2.5 MB"


def test_exabytes():
    assert byte_count(10**18) == "1.0 EB"


@pytest.mark.parametrize("exp", range(1, 7))
def test_unit_prefix_follows_magnitude(exp):
    result = byte_count(3 * 1000**exp)
    number, unit = result.split(" ")
    assert unit == "kMGTPE"[exp - 1] + "B"
    assert float(number) == 3.0


def test_udp_packet_size_formats_as_kilobytes():
    assert byte_count(MAX_UDP_PACKET_SIZE) == "65.5 kB"


def test_now_in_milliseconds_tracks_clock():
    before = int(time.time() * 1000)
    now = now_in_milliseconds()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1