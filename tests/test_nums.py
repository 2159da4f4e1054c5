import pytest

from aoc24.nums import abs_diff, join_ints, make_set, modulo, must_parse, num_digits


@pytest.mark.parametrize("a,b", [(3, 7), (7, 3), (-4, 9), (5, 5), (2.5, 1.0)])
def test_abs_diff_symmetric_and_nonnegative(a, b):
    assert abs_diff(a, b) == abs_diff(b, a)
    assert abs_diff(a, b) >= 0
    assert abs_diff(a, b) == abs(a - b)


@pytest.mark.parametrize("n", [0, 7, 42, -13, 123456789])
def test_must_parse_round_trip(n):
    assert must_parse(str(n)) == n


@pytest.mark.parametrize("text", ["", "abc", "1.5", " 4", "1_000"])
def test_must_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        must_parse(text)


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 2024, 1234567])
def test_num_digits_matches_string_length(n):
    assert num_digits(n) == len(str(n))


def test_num_digits_of_zero():
    assert num_digits(0) == 0


@pytest.mark.parametrize("a,b", [(-1, 5), (-101, 7), (13, 4), (0, 3), (-8, 8)])
def test_modulo_is_nonnegative_for_positive_divisor(a, b):
    r = modulo(a, b)
    assert 0 <= r < b
    assert (a - r) % b == 0


def test_modulo_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        modulo(1, 0)


def test_make_set_deduplicates():
    items = ["r", "wr", "b", "r", "b"]
    result = make_set(items)
    assert result == set(items)
    assert len(result) == 3


def test_join_ints_example_output():
    assert join_ints([3, 7, 1, 7, 2, 1, 0, 6, 3]) == "3,7,1,7,2,1,0,6,3"


def test_join_ints_empty():
    assert join_ints([]) == ""


def test_join_ints_round_trip():
    values = [52, 32, 0, 117440]
    assert [must_parse(s) for s in join_ints(values).split(",")] == values