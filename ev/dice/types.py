"""Dice system type definitions.

Immutable roll model, output styles, and the parse error taxonomy.
"""

from dataclasses import dataclass
from enum import Enum


# Field bounds: dice and face counts are unsigned 16-bit, extra is signed 16-bit
MAX_DICE = 65535
MAX_FACES = 65535
MIN_EXTRA = -32768
MAX_EXTRA = 32767


class OutputStyle(str, Enum):
    """How roll statistics are laid out.

    - SINGLE_LINE: one record per line, suited to Unix pipelines
    - MULTI_LINE: one statistic per line, easier to read
    """

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"


class EvError(str, Enum):
    """Reason a roll could not be parsed.

    The value is the description shown to the user.
    """

    INVALID_FORMAT = "invalid format"
    MISSING_NUMBER_OF_DICE = "missing number of dice"
    MISSING_NUMBER_OF_SIDES = "missing number of sides"
    MISSING_EXTRA = "missing bonus"
    TOO_MANY_DICE = "too many dice"
    TOO_MANY_SIDES = "too many sides"
    EXTRA_TOO_LARGE = "bonus too large"

    @property
    def description(self) -> str:
        """Human readable description of the error."""
        return self.value

    def __str__(self) -> str:
        return self.value


def format_number(value: float) -> str:
    """Format a statistic, dropping the fractional part of whole numbers.

    Examples:
        >>> format_number(6.0)
        '6'
        >>> format_number(3.5)
        '3.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Roll:
    """A dice roll like 2d6+3.

    Attributes:
        num_dice: Number of dice rolled.
        num_faces: Number of faces on each die.
        extra: Flat bonus (or malus) added once to the total.
    """

    num_dice: int
    num_faces: int
    extra: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.num_dice <= MAX_DICE:
            raise ValueError(f"num_dice must be in 1..{MAX_DICE}, got {self.num_dice}")
        if not 1 <= self.num_faces <= MAX_FACES:
            raise ValueError(f"num_faces must be in 1..{MAX_FACES}, got {self.num_faces}")
        if not MIN_EXTRA <= self.extra <= MAX_EXTRA:
            raise ValueError(
                f"extra must be in {MIN_EXTRA}..{MAX_EXTRA}, got {self.extra}"
            )

    def min(self) -> float:
        """Lowest possible total: every die shows 1."""
        return float(self.num_dice + self.extra)

    def max(self) -> float:
        """Highest possible total: every die shows its highest face."""
        return float(self.num_dice * self.num_faces + self.extra)

    def ev(self) -> float:
        """Expected total.

        One fair die with n faces averages (1 + 2 + ... + n) / n = (n + 1) / 2.
        The extra is added once, not per die.
        """
        single_die_ev = (self.num_faces + 1) / 2
        return self.num_dice * single_die_ev + self.extra

    def render(self, style: OutputStyle = OutputStyle.MULTI_LINE) -> str:
        """Render the roll and its statistics.

        Args:
            style: Single line (``"1d6 1 6 3.5"``) or multi line layout.

        Returns:
            Text to print, without a trailing newline.
        """
        low = format_number(self.min())
        high = format_number(self.max())
        expected = format_number(self.ev())

        if style == OutputStyle.SINGLE_LINE:
            return f"{self} {low} {high} {expected}"
        return f"{self}:\n\tmin: {low}\n\tmax: {high}\n\tev : {expected}"

    def __str__(self) -> str:
        notation = f"{self.num_dice}d{self.num_faces}"
        if self.extra != 0:
            notation += f"{self.extra:+d}"
        return notation
