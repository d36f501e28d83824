"""
Game Errors

Exceptions raised by the domain core when it is used outside its contract.
"""


class GameError(Exception):
    """Base class for all game errors."""


class GameOverError(GameError):
    """Raised when a guess is submitted to a session that is no longer playing."""

    def __init__(self, message: str = "Game is already over"):
        super().__init__(message)


class HintAlreadyUsedError(GameError):
    """Raised when a session tries to use its one hint a second time."""

    def __init__(self, message: str = "Hint already used"):
        super().__init__(message)


class HintUnavailableError(GameError):
    """Raised when every letter position is already known to be correct."""

    def __init__(self, message: str = "All positions are already correct - no positions available for hint"):
        super().__init__(message)


class InvalidConfigurationError(GameError, ValueError):
    """Raised when a GameConfig is built with unsupported values."""


class CorruptSnapshotError(GameError):
    """Raised when a persisted game snapshot is missing fields or has bad types."""
