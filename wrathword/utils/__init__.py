"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_player
from .helpers import get_player_id, get_player_identity, session_to_dict
from .game_logger import GameLogger, game_logger

__all__ = [
    'require_player', 'get_player_id', 'get_player_identity', 'session_to_dict',
    'GameLogger', 'game_logger'
]
