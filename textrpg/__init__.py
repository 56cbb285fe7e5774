"""TextRPG - a terminal character training game."""

__version__ = "0.1.0"
