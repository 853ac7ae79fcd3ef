"""Command-line settings for the dining table simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\f\n\r\v"
_MAX_PHILOSOPHERS = 200
_MIN_DURATION_MS = 60


class InvalidInput(ValueError):
    """Raised when the command-line arguments do not describe a valid table."""

    def __init__(self, message: str = "wrong input") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; durations are in milliseconds.

    A ``meal_limit`` of 0 means the philosophers eat until one of them dies.
    """

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_limit: int = 0

    @property
    def has_meal_limit(self) -> bool:
        return self.meal_limit > 0


def parse_long(text: str) -> int:
    """Read a leading signed decimal integer, ignoring whatever follows it.

    Leading whitespace is skipped and one optional sign is accepted; text
    with no digits in that position reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Expects four or five arguments: number of philosophers, time to die,
    time to eat, time to sleep and, optionally, the number of meals each
    philosopher must eat.  Raises :class:`InvalidInput` otherwise.
    """
    if len(args) not in (4, 5):
        raise InvalidInput()
    values = [parse_long(arg) for arg in args]
    if len(values) == 5 and values[4] <= 0:
        raise InvalidInput()
    philosophers, time_to_die, time_to_eat, time_to_sleep = values[:4]
    if not 0 < philosophers <= _MAX_PHILOSOPHERS:
        raise InvalidInput()
    if min(time_to_die, time_to_eat, time_to_sleep) < _MIN_DURATION_MS:
        raise InvalidInput()
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meal_limit=values[4] if len(values) == 5 else 0,
    )


def lone_philosopher_lines(settings: Settings) -> list[str]:
    """Return the log of a table with a single philosopher, who owns one fork."""
    if settings.philosophers != 1:
        raise ValueError("only a table with one philosopher has a fixed log")
    return [
        "0 1 has taken a fork",
        f"{settings.time_to_die} 1 has died",
    ]