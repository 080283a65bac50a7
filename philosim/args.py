"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2147483647
MAX_ARGUMENT_LENGTH = 11

USAGE = "philos - t die - t eat - t sleep - [meals]"

_WHITESPACE = " \n\t\f\v\r"
_NUMERIC_CHARS = frozenset("0123456789 -+")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used.

    ``to_stderr`` tells whether the message belongs on standard error
    rather than standard output.
    """

    def __init__(self, message: str, to_stderr: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.to_stderr = to_stderr


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def is_numeric(text: str) -> bool:
    """Return True if ``text`` holds only digits, spaces and sign characters."""
    return all(char in _NUMERIC_CHARS for char in text)


def parse_limited_int(text: str) -> int:
    """Parse a non-negative number that fits in a 32-bit signed integer.

    Leading whitespace and any run of sign characters are accepted; a single
    ``-`` in the run makes the number negative. Parsing stops at the first
    non-digit. Negative results and results above ``INT_MAX`` are rejected.
    """
    rest = text.lstrip(_WHITESPACE)
    if not rest:
        raise ArgumentError("Please, fill all the arguments")
    unsigned = rest.lstrip("+-")
    signs = rest[: len(rest) - len(unsigned)]
    negative = "-" in signs or not unsigned
    digits = []
    for char in unsigned:
        if not char.isdigit() or char not in "0123456789":
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    if negative:
        number = -number
    if number > INT_MAX or number < 0:
        raise ArgumentError(
            "Negative or numbers out of the int limit are not allowed"
        )
    return number


def parse_settings(args: list[str]) -> Settings:
    """Build ``Settings`` from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError(USAGE)
    for arg in args:
        if len(arg) > MAX_ARGUMENT_LENGTH:
            raise ArgumentError("Error int out of limits", to_stderr=True)
        if not is_numeric(arg):
            raise ArgumentError("The program needs numerical arguments")
    philosophers = parse_limited_int(args[0])
    if philosophers == 0:
        raise ArgumentError("The program needs at least 1 philosopher")
    time_to_die = parse_limited_int(args[1])
    time_to_eat = parse_limited_int(args[2])
    time_to_sleep = parse_limited_int(args[3])
    meals = parse_limited_int(args[4]) if len(args) == 5 else None
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals=meals,
    )