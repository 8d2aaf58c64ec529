"""Display helpers for CLI output."""

import typer
from rich.console import Console

from ev.dice.types import OutputStyle, Roll


# Errors go to stderr so piped output stays clean
err_console = Console(stderr=True)


def display_roll(roll: Roll, style: OutputStyle) -> None:
    """Display roll statistics on stdout.

    Written with ``typer.echo`` so the tabs of the multi line layout
    are kept as-is.

    Args:
        roll: Parsed roll.
        style: Output layout.
    """
    typer.echo(roll.render(style))


def display_error(message: str) -> None:
    """Display an error message on stderr, prefixed with the program name.

    Args:
        message: Error message.
    """
    # User input is echoed back, so no markup or emoji codes
    err_console.print(
        f"ev: {message}",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
