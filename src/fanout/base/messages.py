"""Per-sink message shapes.

Each sink kind consumes exactly one of these models. The builder produces them
from an ``InputData`` payload; they are never stored or compared afterwards.
"""

import string
from typing import Any, ClassVar, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_DATA_SIZE = 6
CAN_ID_MIN = -(2**31)
CAN_ID_MAX = 2**31 - 1


class CanMessage(BaseModel):
    """Frame message: an identifier and a fixed-size data array.

    Attributes:
        can_id: Frame identifier (32-bit signed).
        data: Exactly ``MAX_DATA_SIZE`` non-negative integers.
    """

    model_config = ConfigDict(frozen=True)

    CAPACITY: ClassVar[int] = MAX_DATA_SIZE

    can_id: int = Field(ge=CAN_ID_MIN, le=CAN_ID_MAX)
    data: Tuple[int, ...]

    @field_validator("data")
    @classmethod
    def _check_data(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if len(value) != MAX_DATA_SIZE:
            raise ValueError(f"data must hold exactly {MAX_DATA_SIZE} values, got {len(value)}")
        if any(v < 0 for v in value):
            raise ValueError("data values must be non-negative")
        return value

    @classmethod
    def pad(cls, can_id: int, values: Sequence[int]) -> "CanMessage":
        """Build a frame, filling unused trailing slots with zero."""
        if len(values) > MAX_DATA_SIZE:
            raise ValueError(f"at most {MAX_DATA_SIZE} values fit in a frame, got {len(values)}")
        data = tuple(values) + (0,) * (MAX_DATA_SIZE - len(values))
        return cls(can_id=can_id, data=data)


def _placeholder_count(template: str) -> int:
    count = 0
    for _, field_name, _, _ in string.Formatter().parse(template):
        if field_name is None:
            continue
        if field_name != "":
            raise ValueError(f"only positional '{{}}' placeholders are allowed, got {{{field_name}}}")
        count += 1
    return count


class FormatMessage(BaseModel):
    """Formatted message: a text template and the values for its placeholders."""

    model_config = ConfigDict(frozen=True)

    template: str
    values: Tuple[Any, ...] = ()

    @model_validator(mode="after")
    def _check_arity(self) -> "FormatMessage":
        expected = _placeholder_count(self.template)
        if expected != len(self.values):
            raise ValueError(
                f"template has {expected} placeholders but {len(self.values)} values were given"
            )
        return self

    def render(self) -> str:
        return self.template.format(*self.values)
