import pytest

from philosophers.args import ArgumentError, Settings, parse_args, parse_number


def test_parse_number_plain_digits():
    assert parse_number("42") == 42
    assert parse_number("007") == 7


def test_parse_number_empty_is_zero():
    assert parse_number("") == 0


@pytest.mark.parametrize("text", ["+5", "-5", " 5", "5 ", "5a", "1.5", "x"])
def test_parse_number_rejects_non_digits(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_parse_number_rejects_overflow():
    assert parse_number("2147483647") == 2147483647
    with pytest.raises(ValueError):
        parse_number("2147483648")


def test_parse_args_four_values():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_args_with_meals():
    settings = parse_args(["4", "410", "200", "200", "7"])
    assert settings.number_of_eats == 7
    assert settings.number_of_philosophers == 4


def test_zero_eat_and_sleep_allowed():
    settings = parse_args(["2", "100", "0", "0"])
    assert settings.time_to_eat == 0
    assert settings.time_to_sleep == 0


@pytest.mark.parametrize(
    "argv",
    [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]],
)
def test_wrong_argument_count(argv):
    with pytest.raises(ArgumentError, match="^invalid arguments$"):
        parse_args(argv)


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "-1", "200"],
        ["abc", "800", "200", "200"],
        ["5", "800", "200", "+2"],
    ],
)
def test_invalid_values(argv):
    with pytest.raises(ArgumentError, match="^invalid argument values$"):
        parse_args(argv)


@pytest.mark.parametrize("eats", ["0", "-3", "x", ""])
def test_invalid_number_of_eats(eats):
    with pytest.raises(ArgumentError, match="^invalid number of eats$"):
        parse_args(["5", "800", "200", "200", eats])


def test_values_checked_before_eats():
    with pytest.raises(ArgumentError, match="^invalid argument values$"):
        parse_args(["0", "800", "200", "200", "0"])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["1"])