"""Tests for component configuration."""

import pytest
from pydantic import ValidationError

from fanout.base.config import ComponentConfig
from fanout.base.levels import Level


def test_defaults():
    """Verify the default frame id and level."""
    config = ComponentConfig()

    assert config.can_id == 10
    assert config.default_level is Level.INFO


@pytest.mark.parametrize("value,expected", [
    ("error", Level.ERROR),
    ("Fatal", Level.FATAL),
    (1, Level.WARNING),
    (Level.INFO, Level.INFO),
])
def test_default_level_parsing(value, expected):
    """Verify levels parse from names, values and members."""
    assert ComponentConfig(default_level=value).default_level is expected


@pytest.mark.parametrize("value", ["verbose", 4, Level.COUNT, -1])
def test_invalid_default_level_is_rejected(value):
    """Verify unknown or out-of-range levels fail validation."""
    with pytest.raises(ValidationError):
        ComponentConfig(default_level=value)


def test_can_id_must_fit_int32():
    """Verify the frame id is limited to 32 bits."""
    with pytest.raises(ValidationError):
        ComponentConfig(can_id=2**31)


def test_out_of_range_level_is_a_plain_validation_error():
    """Verify integer levels are range-checked before any level lookup."""
    with pytest.raises(ValidationError) as info:
        ComponentConfig(default_level=Level.COUNT.value)

    assert "not a loggable level: 4" in str(info.value)
