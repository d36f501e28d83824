"""
Use Cases Package

Orchestration of the game core with its repositories.
"""

from .abandon_game import AbandonedGameInfo, AbandonGameUseCase
from .snapshots import persist_session, restore_session, session_to_snapshot
from .start_game import StartGameResult, StartGameUseCase, StartOutcome
from .submit_guess import SubmitGuessError, SubmitGuessResult, SubmitGuessUseCase
from .use_hint import UseHintError, UseHintResult, UseHintUseCase

__all__ = [
    'AbandonedGameInfo', 'AbandonGameUseCase',
    'persist_session', 'restore_session', 'session_to_snapshot',
    'StartGameResult', 'StartGameUseCase', 'StartOutcome',
    'SubmitGuessError', 'SubmitGuessResult', 'SubmitGuessUseCase',
    'UseHintError', 'UseHintResult', 'UseHintUseCase'
]
