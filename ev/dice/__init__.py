"""Dice roll statistics.

Parses rolls in XdY[+Z|-Z] notation and computes their minimum, maximum
and expected value.

Usage:
    >>> from ev.dice import parse_roll, OutputStyle
    >>> roll = parse_roll("2d4+1")
    >>> roll.render(OutputStyle.SINGLE_LINE)
    '2d4+1 3 9 6'
"""

# Types
from ev.dice.types import (
    MAX_DICE,
    MAX_EXTRA,
    MAX_FACES,
    MIN_EXTRA,
    EvError,
    OutputStyle,
    Roll,
)

# Parser
from ev.dice.parser import parse_roll, RollParseError

__all__ = [
    # Types
    "Roll",
    "OutputStyle",
    "EvError",
    "MAX_DICE",
    "MAX_FACES",
    "MIN_EXTRA",
    "MAX_EXTRA",
    # Parser
    "parse_roll",
    "RollParseError",
]
