"""Command-line demo: one component fanning an event out to two sinks."""

import logging

import typer

from fanout.base.config import ComponentConfig
from fanout.base.dispatch import Component
from fanout.base.payload import InputData
from fanout.sinks import CanLogger, FileLogger

app = typer.Typer(help="Fan one input event out to a can logger and a file logger.")


@app.command()
def run(
    length: int = typer.Option(1, "--length", min=0, help="Payload length"),
    width: int = typer.Option(2, "--width", min=0, help="Payload width"),
    height: int = typer.Option(3, "--height", min=0, help="Payload height"),
    level: str = typer.Option("info", "--level", "-l", help="info, warning, error or fatal"),
    can_id: int = typer.Option(10, "--can-id", help="Frame identifier"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Process one payload through a [can logger, file logger] component.

    Examples:
        fanout-demo
        fanout-demo --length 4 --level warning
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        config = ComponentConfig(can_id=can_id, default_level=level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    component = Component(CanLogger(), FileLogger(), config=config)
    component.process(InputData(length, width, height))


def main() -> None:
    app()
