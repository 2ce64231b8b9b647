import json
import sys
from typing import Iterable, List, Optional, Tuple

import click

from . import config
from .session import Calculator

QUIT_WORDS = {"quit", "exit"}


def replay(keys: Iterable[str], calculator: Optional[Calculator] = None) -> Tuple[Calculator, List[str]]:
    """Feed keys into a session, returning it with the keys that were not bound."""
    calculator = calculator if calculator is not None else Calculator()
    ignored = []
    for key in keys:
        if not calculator.press_key(key):
            ignored.append(key)
    return calculator, ignored


def render_lines(calculator: Calculator) -> List[str]:
    snapshot = calculator.snapshot()
    lines = [snapshot["preview"]] if snapshot["preview"] else []
    lines.append(snapshot["rendered"])
    return lines


@click.group()
@click.option(
    "--log-level",
    default=config.LOG_LEVEL,
    show_default=True,
    help="Logging level (DEBUG shows every state transition)",
)
def main(log_level: str) -> None:
    """Keypad calculator."""
    config.configure_logging(log_level)


@main.command()
@click.argument("keys", nargs=-1, required=True)
def press(keys: Tuple[str, ...]) -> None:
    """Replay KEYS (e.g. 5 + 3 Enter) and print the resulting state as JSON."""
    calculator, ignored = replay(keys)
    for key in ignored:
        click.echo(f"Ignoring unknown key: {key}", err=True)
    click.echo(json.dumps(calculator.snapshot(), ensure_ascii=False))


@main.command()
def repl() -> None:
    """Read whitespace-separated keys from stdin and show the display after each line."""
    calculator = Calculator()
    for line in sys.stdin:
        keys = line.split()
        if keys and keys[0].lower() in QUIT_WORDS:
            break
        _, ignored = replay(keys, calculator)
        for key in ignored:
            click.echo(f"Ignoring unknown key: {key}", err=True)
        for out in render_lines(calculator):
            click.echo(out)


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Host to bind to")
@click.option("--port", default=config.PORT, show_default=True, type=int, help="Port to bind to")
@click.option("--debug", is_flag=True, default=False, help="Enable the Flask debugger")
def serve(host: str, port: int, debug: bool) -> None:
    """Run the web keypad."""
    from .webapp.server import app

    click.echo(f"Access at: http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":  # pragma: no cover
    main()
