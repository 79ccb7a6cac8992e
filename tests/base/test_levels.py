"""Tests for severity levels."""

import pytest

from fanout.base.errors import LevelInvariantError
from fanout.base.levels import Level, level_name, to_level


def test_level_names_are_distinct_and_stable():
    """Verify each valid level has its own stable name."""
    valid = [Level.INFO, Level.WARNING, Level.ERROR, Level.FATAL]
    names = [level_name(level) for level in valid]

    assert names == ["info", "warning", "error", "fatal"]
    assert len(set(names)) == len(valid)
    assert [level_name(level) for level in valid] == names


def test_level_name_accepts_plain_ints():
    """Verify level_name accepts integer values."""
    assert level_name(2) == "error"


def test_levels_are_ordered_by_severity():
    """Verify levels compare by severity."""
    assert Level.INFO < Level.WARNING < Level.ERROR < Level.FATAL < Level.COUNT


@pytest.mark.parametrize("bad", [Level.COUNT, 4, 99, -1])
def test_level_name_rejects_values_outside_range(bad):
    """Verify out-of-range values raise LevelInvariantError."""
    with pytest.raises(LevelInvariantError):
        level_name(bad)


def test_level_name_rejects_non_levels():
    """Verify non-integer values raise LevelInvariantError."""
    with pytest.raises(LevelInvariantError):
        level_name("info")


def test_level_invariant_error_is_an_assertion():
    """Verify the level error is an AssertionError."""
    assert issubclass(LevelInvariantError, AssertionError)


def test_to_level_parses_names_and_values():
    """Verify to_level parses names and values and rejects the sentinel."""
    assert to_level("WARNING") is Level.WARNING
    assert to_level(3) is Level.FATAL
    with pytest.raises(ValueError):
        to_level("verbose")
    with pytest.raises(LevelInvariantError):
        to_level(Level.COUNT)
