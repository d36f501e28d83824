"""
Data Models Package

Contains the game's value objects, the GameSession aggregate and its errors.
"""

from .errors import (
    GameError, GameOverError, HintAlreadyUsedError, HintUnavailableError,
    InvalidConfigurationError, CorruptSnapshotError
)
from .tile_state import TileState
from .feedback import Feedback
from .hint_cell import HintCell
from .game_config import GameConfig, GameMode
from .game_session import GameSession, GameStatus

__all__ = [
    'GameError', 'GameOverError', 'HintAlreadyUsedError', 'HintUnavailableError',
    'InvalidConfigurationError', 'CorruptSnapshotError',
    'TileState', 'Feedback', 'HintCell',
    'GameConfig', 'GameMode',
    'GameSession', 'GameStatus'
]
