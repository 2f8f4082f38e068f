import pytest

from pushswap.parsing import (
    ParseError,
    has_duplicates,
    parse_int,
    parse_numbers,
    to_ranks,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-15", -15),
        ("0", 0),
        ("2147483647", 2147483647),
        ("-2147483647", -2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_accepts_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "99999999999", "1a", "abc", "+-5", "--1", " 1", "1.5"],
)
def test_parse_int_rejects_invalid(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_int_without_digits_reads_zero():
    assert parse_int("") == 0
    assert parse_int("-") == 0


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_parse_numbers_keeps_order():
    assert parse_numbers(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_numbers_fails_on_any_bad_argument():
    with pytest.raises(ParseError):
        parse_numbers(["1", "2", "three"])


def test_has_duplicates():
    assert has_duplicates([5, 1, 5]) is True
    assert has_duplicates([5, 1, 4]) is False
    assert has_duplicates([]) is False


@pytest.mark.parametrize("values", [[30, 10, 20], [-5, 100, 0, 7], [1], [9, 8, 7, 6]])
def test_to_ranks_is_permutation_preserving_order(values):
    ranks = to_ranks(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            assert (x < y) == (ranks[i] < ranks[j])


def test_to_ranks_of_sorted_input_is_identity():
    assert to_ranks([-3, 0, 12]) == [0, 1, 2]