"""Main CLI application for ev."""

import logging
import sys
from typing import Iterable, Optional

import typer

from ev import __version__
from ev.cli.display import display_error, display_roll
from ev.config import get_settings
from ev.dice import OutputStyle, RollParseError, parse_roll

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ev",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ev: {__version__}")
        raise typer.Exit()


def _configure_logging() -> None:
    """Send log records to stderr at the configured level."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(levelname)s:%(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_and_display(line: str, style: OutputStyle) -> bool:
    """Parse one roll and display its statistics or the parse error.

    Args:
        line: Raw roll text; surrounding whitespace is stripped.
        style: Output layout for a successful parse.

    Returns:
        True if the roll was parsed.
    """
    line = line.strip()
    try:
        roll = parse_roll(line)
    except RollParseError as e:
        display_error(str(e))
        return False

    display_roll(roll, style)
    return True


def _read_lines(rolls: Optional[list[str]]) -> Iterable[str]:
    # Positional rolls win; otherwise read stdin until end of stream
    if rolls:
        return rolls
    # Undecodable bytes become U+FFFD so the line is rejected, not the run
    return typer.get_text_stream("stdin", errors="replace")


@app.command()
def main(
    rolls: Optional[list[str]] = typer.Argument(
        None, help="Rolls to evaluate; read from stdin, one per line, if omitted", show_default=False
    ),
    single_line: bool = typer.Option(False, "--single-line", "-s", help="single line display"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="display version number",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Compute the minimum, maximum and expected value of dice rolls.

    roll: XdY, XdY+Z, XdY-Z (e.g. 1d6, 2d4+1, 3d8-1)
    """
    _configure_logging()
    settings = get_settings()
    style = OutputStyle.SINGLE_LINE if single_line else settings.output_style

    parsed = failed = 0
    for line in _read_lines(rolls):
        if parse_and_display(line, style):
            parsed += 1
        else:
            failed += 1

    logger.info("Evaluated %d rolls, %d rejected", parsed, failed)


if __name__ == "__main__":
    app()
