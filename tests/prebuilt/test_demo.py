"""Tests for the demo command."""

from typer.testing import CliRunner

from fanout.prebuilt.demo import app

runner = CliRunner()


def test_demo_prints_both_sinks_in_order():
    """Verify the demo prints the can line then the file line."""
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "info: can logger: can id: 10, data: [1, 2, 3, 0, 0, 0]",
        "info: file logger: input data: length: 1, width: 2, height: 3",
    ]


def test_demo_options_override_payload_level_and_id():
    """Verify demo options reach the payload, level and frame id."""
    result = runner.invoke(app, ["--length", "4", "--width", "5", "--height", "6", "-l", "error", "--can-id", "42"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "error: can logger: can id: 42, data: [4, 5, 6, 0, 0, 0]",
        "error: file logger: input data: length: 4, width: 5, height: 6",
    ]


def test_demo_rejects_unknown_level():
    """Verify an unknown level name exits with status 2."""
    result = runner.invoke(app, ["--level", "verbose"])

    assert result.exit_code == 2
