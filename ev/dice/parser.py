"""Dice notation parser.

Parses rolls of the form XdY, XdY+Z and XdY-Z, e.g. 1d6, 2d4+1, 3d10-1.
"""

import logging
import re

from ev.dice.types import (
    MAX_DICE,
    MAX_EXTRA,
    MAX_FACES,
    MIN_EXTRA,
    EvError,
    Roll,
)

logger = logging.getLogger(__name__)

# Max number of digits in a field; one more is scanned to detect overflow
MAX_DIGITS = 5

# Bounded digit run, so pathological input is never read in full
DIGITS_PATTERN = re.compile(r"[0-9]{1,%d}" % (MAX_DIGITS + 1))


class RollParseError(ValueError):
    """Error parsing a roll.

    Attributes:
        error: Which rule of the notation was broken.
        line: The input that was rejected.
    """

    def __init__(self, error: EvError, line: str) -> None:
        super().__init__(f"{error.description}: {line}")
        self.error = error
        self.line = line


def _read_int(
    line: str,
    pos: int,
    missing: EvError,
    too_large: EvError,
    low: int,
    high: int,
    sign: int = 1,
) -> tuple[int, int]:
    """Read one integer field starting at ``pos``.

    Returns:
        The signed value and the position just past its digits.
    """
    match = DIGITS_PATTERN.match(line, pos)
    if not match:
        raise RollParseError(missing, line)

    digits = match.group()
    if digits.startswith("0"):
        raise RollParseError(EvError.INVALID_FORMAT, line)
    if len(digits) > MAX_DIGITS:
        raise RollParseError(too_large, line)

    value = sign * int(digits)
    if not low <= value <= high:
        raise RollParseError(too_large, line)

    return value, match.end()


def parse_roll(line: str) -> Roll:
    """Parse a roll in XdY[+Z|-Z] notation.

    The whole line must match; leading zeros, whitespace and trailing
    characters are rejected.

    Args:
        line: A single roll, already stripped of surrounding whitespace.

    Returns:
        The parsed Roll.

    Raises:
        RollParseError: If the line is not a valid roll. ``error`` tells
            which part was missing, malformed, or out of range.

    Examples:
        >>> parse_roll("2d4+1")
        Roll(num_dice=2, num_faces=4, extra=1)
        >>> parse_roll("3d10-1")
        Roll(num_dice=3, num_faces=10, extra=-1)
    """
    try:
        return _parse(line)
    except RollParseError as e:
        logger.debug("Rejected roll %r: %s", line, e.error.description)
        raise


def _parse(line: str) -> Roll:
    num_dice, pos = _read_int(
        line, 0, EvError.MISSING_NUMBER_OF_DICE, EvError.TOO_MANY_DICE, 1, MAX_DICE
    )

    if not line.startswith("d", pos):
        raise RollParseError(EvError.INVALID_FORMAT, line)
    pos += 1

    num_faces, pos = _read_int(
        line, pos, EvError.MISSING_NUMBER_OF_SIDES, EvError.TOO_MANY_SIDES, 1, MAX_FACES
    )

    extra = 0
    if line.startswith(("+", "-"), pos):
        sign = -1 if line[pos] == "-" else 1
        extra, pos = _read_int(
            line,
            pos + 1,
            EvError.MISSING_EXTRA,
            EvError.EXTRA_TOO_LARGE,
            MIN_EXTRA,
            MAX_EXTRA,
            sign=sign,
        )

    if pos != len(line):
        raise RollParseError(EvError.INVALID_FORMAT, line)

    return Roll(num_dice=num_dice, num_faces=num_faces, extra=extra)
