"""Command-line argument parsing for the dining simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")
_MAX_SCAN = 10
_MIN_DURATION_MS = 60
_MAX_PHILOSOPHERS = 200


class ConfigError(Exception):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; durations are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int | None = None


def parse_number(text: str) -> int:
    """Read a non-negative integer the lenient way the simulator expects.

    Leading whitespace and a '+' are skipped, scanning stops at the first
    non-digit, and anything reaching past the tenth character yields 0.
    A leading '-' is rejected.
    """
    stripped = text.lstrip(_WHITESPACE)
    position = len(text) - len(stripped)
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            raise ConfigError("We need only positive input")
        position += 1
    digits = _DIGITS.match(text, position).group()
    if not digits or position + len(digits) > _MAX_SCAN:
        return 0
    return int(digits)


def parse_args(args: list[str]) -> Settings:
    """Build Settings from the four or five positional arguments."""
    if len(args) not in (4, 5):
        raise ConfigError("not enough arguments or too many arguments")
    philosophers, time_to_die, time_to_eat, time_to_sleep = (
        parse_number(arg) for arg in args[:4]
    )
    max_meals = parse_number(args[4]) if len(args) == 5 else None
    if min(time_to_die, time_to_eat, time_to_sleep) < _MIN_DURATION_MS:
        raise ConfigError("Too less time to process")
    if philosophers == 0:
        raise ConfigError("Need to have philosophers")
    if philosophers > _MAX_PHILOSOPHERS:
        raise ConfigError("Too many philosophers")
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        max_meals=max_meals,
    )