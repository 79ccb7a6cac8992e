"""Configuration for a fan-out component."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fanout.base.builder import DEFAULT_CAN_ID
from fanout.base.levels import Level, to_level
from fanout.base.messages import CAN_ID_MAX, CAN_ID_MIN


class ComponentConfig(BaseModel):
    """Settings bound to a component at construction.

    Attributes:
        can_id: Identifier stamped on frame messages.
        default_level: Level used by ``process`` when none is given. Accepts a
            ``Level``, its integer value or its name (e.g. ``"warning"``).
    """

    model_config = ConfigDict(frozen=True)

    can_id: int = Field(default=DEFAULT_CAN_ID, ge=CAN_ID_MIN, le=CAN_ID_MAX)
    default_level: Level = Level.INFO

    @field_validator("default_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value < Level.COUNT:
                raise ValueError(f"not a loggable level: {int(value)}")
            return Level(value)
        if isinstance(value, str):
            return to_level(value)
        return value
