import pytest

from groundwork import mathz


@pytest.mark.parametrize("a, b", [(3, 7), (7, 3), (-5, 2), (4, 4)])
def test_max_and_min_int64(a, b):
    high = mathz.max_int64(a, b)
    low = mathz.min_int64(a, b)
    assert high >= low
    assert {high, low} == {a, b}
    assert high >= a and high >= b
    assert low <= a and low <= b


def test_min_int():
    assert mathz.min_int(3, 7) == 3
    assert mathz.min_int(7, 3) == 3
    assert mathz.min_int(-1, -1) == -1


def test_min_of_ordered_types():
    assert mathz.min_of("apple", "banana") == "apple"
    assert mathz.min_of(2.5, 1.5) == 1.5
    assert mathz.min_of(10, 20) == 10


def test_min_of_tie_returns_second():
    first = (1, "first")
    second = (1, "first")
    assert mathz.min_of(first, second) is second