"""ev - minimum, maximum and expected value of dice rolls."""

__version__ = "0.2.0"
