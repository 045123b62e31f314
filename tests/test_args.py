import pytest

from philosophers.args import INT_MAX, ArgumentError, atoi, validate_args


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t-17xyz", -17),
        ("+8", 8),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_validate_four_args():
    assert validate_args(["5", "800", "200", "200"]) == [5, 800, 200, 200]


def test_validate_five_args():
    assert validate_args(["5", "800", "200", "200", "7"]) == [5, 800, 200, 200, 7]


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_wrong_count(args):
    with pytest.raises(ArgumentError, match="4 or 5 arguments"):
        validate_args(args)


def test_empty_argument():
    with pytest.raises(ArgumentError, match="Must have arguments"):
        validate_args(["5", "", "200", "200"])


@pytest.mark.parametrize("bad", ["-5", "+5", "5a", " 5"])
def test_non_digit(bad):
    with pytest.raises(ArgumentError, match="positive integers"):
        validate_args([bad, "800", "200", "200"])


@pytest.mark.parametrize("bad", ["0", "000", str(INT_MAX), str(INT_MAX + 1)])
def test_out_of_range(bad):
    with pytest.raises(ArgumentError, match="mutated"):
        validate_args(["5", bad, "200", "200"])


def test_largest_accepted_value():
    assert validate_args(["1", "1", "1", str(INT_MAX - 1)])[3] == INT_MAX - 1


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        validate_args(["x"])