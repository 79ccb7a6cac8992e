"""Sink-agnostic event payload."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class InputData:
    """Raw facts about one occurrence to be logged.

    All fields are sizes, so they must be non-negative integers.
    """

    length: int
    width: int
    height: int

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{f.name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")
