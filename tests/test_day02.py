import pytest

from aoc24.day02 import is_safe_damped, pluck


@pytest.mark.parametrize(
    "report,expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_example(report, expected):
    assert is_safe_damped(report, 0) is expected


@pytest.mark.parametrize(
    "report,expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_example2(report, expected):
    assert is_safe_damped(report, 1) is expected


def test_negative_errors_never_safe():
    assert is_safe_damped([1, 2, 3], -1) is False


def test_pluck_removes_one():
    levels = [1, 3, 2, 4, 5]
    assert pluck(levels, 1) == [1, 2, 4, 5]
    assert levels == [1, 3, 2, 4, 5]


def test_pluck_out_of_range():
    with pytest.raises(IndexError):
        pluck([1, 2], 2)