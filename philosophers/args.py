"""Command-line argument parsing and validation."""

import re

INT_MAX = 2**31 - 1

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are rejected."""


def atoi(text):
    """Parse a leading integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    return sign * int(digits) if digits else 0


def validate_args(args):
    """Check the program arguments (without the program name).

    There must be four or five of them, each a positive integer below
    INT_MAX. Returns the values as a list of ints.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError("./philo must have 4 or 5 arguments.")
    values = []
    for arg in args:
        if not arg:
            raise ArgumentError("Must have arguments.")
        if any(ch not in "0123456789" for ch in arg):
            raise ArgumentError("./philo args must be positive integers.")
        value = int(arg)
        if value >= INT_MAX or value <= 0:
            raise ArgumentError("Error - AV - These INT are mutated!!")
        values.append(value)
    return values