"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch the whole family at once."""


class GameError(Exception):
    """Top-level exception of the application."""


class InvalidMoveFormatError(GameError):
    """Move notation does not match two concatenated algebraic squares (ex. e2e4)."""


class IllegalMoveError(GameError):
    """Move is well-formed, but breaks the ownership / occupancy rules."""


class InvalidBoardError(GameError):
    """Grid of pieces is not 8x8 or contains unknown piece tags."""


class RepositoryError(GameError):
    """Persistence layer could not store the game."""
