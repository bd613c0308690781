"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    number_of_eats: int | None = None


def parse_number(text: str) -> int:
    """Parse an unsigned decimal number made of ASCII digits only.

    An empty string counts as zero. Signs, spaces and any other character
    are rejected, as are values that do not fit a 32-bit signed integer.
    """
    if any(ch not in _DIGITS for ch in text):
        raise ValueError(f"not a number: {text!r}")
    value = int(text) if text else 0
    if value > _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _number_or(text: str, message: str) -> int:
    try:
        return parse_number(text)
    except ValueError as exc:
        raise ArgumentError(message) from exc


def parse_args(argv: list[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Expects four or five values: philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    if not 4 <= len(argv) <= 5:
        raise ArgumentError("invalid arguments")

    message = "invalid argument values"
    count, die, eat, sleep = (_number_or(text, message) for text in argv[:4])
    if count <= 0 or die <= 0 or eat < 0 or sleep < 0:
        raise ArgumentError(message)

    eats = None
    if len(argv) == 5:
        eats = _number_or(argv[4], "invalid number of eats")
        if eats <= 0:
            raise ArgumentError("invalid number of eats")

    return Settings(
        number_of_philosophers=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        number_of_eats=eats,
    )