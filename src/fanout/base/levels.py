"""Severity levels for fan-out logging."""

from enum import IntEnum
from typing import Union

from fanout.base.errors import LevelInvariantError


class Level(IntEnum):
    """Ordered severity of a log event.

    ``COUNT`` is a sentinel bound used for validity checks only; it is never a
    loggable level.
    """

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3
    COUNT = 4


_NAMES = ("info", "warning", "error", "fatal")


def level_name(level: Union[Level, int]) -> str:
    """Return the canonical lowercase name of a level.

    Args:
        level: A ``Level`` member or its integer value.

    Returns:
        Name such as ``"info"`` or ``"fatal"``.

    Raises:
        LevelInvariantError: If ``level`` is not below ``Level.COUNT``.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise LevelInvariantError(f"Not a log level: {level!r}")
    if not 0 <= level < Level.COUNT:
        raise LevelInvariantError(f"Log level out of range: {int(level)}")
    return _NAMES[level]


def to_level(value: Union[Level, int, str]) -> Level:
    """Parse a level from its name or value; the sentinel is rejected."""
    if isinstance(value, str):
        try:
            return Level(_NAMES.index(value.strip().lower()))
        except ValueError:
            raise ValueError(f"Unknown log level name: {value!r}") from None
    level_name(value)
    return Level(value)
