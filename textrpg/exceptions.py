"""Errors raised by the game."""


class GameError(Exception):
    """Base class for fatal game errors."""


class InputStreamError(GameError):
    """The input stream ended or could not be read."""


class ValidationError(GameError):
    """Player input failed a fatal validation check."""
