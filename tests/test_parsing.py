import pytest

from pushswap.parsing import (
    ParseError,
    count_significant_digits,
    is_numeric,
    parse_arguments,
    parse_int,
    split_args,
)


@pytest.mark.parametrize("token", ["0", "42", "-7", "+13", "007"])
def test_is_numeric_accepts_signed_digits(token):
    assert is_numeric(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "1a", "--1", " 1", "1-"])
def test_is_numeric_rejects_other_text(token):
    assert is_numeric(token) is False


def test_count_significant_digits_ignores_zeros_and_signs():
    assert count_significant_digits("-0001000") == 1
    assert count_significant_digits("0000") == 0


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "12a", "1 "])
def test_parse_int_rejects(token):
    with pytest.raises(ParseError):
        parse_int(token)


def test_parse_int_skips_leading_whitespace():
    assert parse_int(" \t-15") == -15


def test_parse_int_bare_sign_reads_zero():
    assert parse_int("+") == 0


def test_split_args_drops_empty_pieces():
    assert split_args("  3  2 1 ") == ["3", "2", "1"]


def test_single_argument_is_split():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_several_arguments():
    assert parse_arguments(["5", "-4", "+9"]) == [5, -4, 9]


def test_no_arguments_give_empty_list():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["1 2 1"],
        ["1", "2", "2"],
        ["1 + 2"],
        ["1 two 3"],
        ["12345678901"],
        ["1", "2147483648"],
        ["1", "x"],
    ],
)
def test_invalid_arguments_raise(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_many_leading_zeros_are_allowed():
    assert parse_arguments(["000000000000001", "2"]) == [1, 2]


def test_parse_error_is_value_error_with_message():
    with pytest.raises(ValueError, match="Error"):
        parse_arguments(["1 1"])


def test_round_trip_through_text():
    values = [8, -3, 2147483647, -2147483648, 0]
    assert parse_arguments([" ".join(str(v) for v in values)]) == values