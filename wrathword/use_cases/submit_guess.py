"""
Submit Guess Use Case

Validates a guess, applies it to the session, persists the result and marks
daily completion once the game ends.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game_session import GameSession, GameStatus
from ..repositories.base import CompletionRepository, GameRepository, WordList
from .snapshots import persist_session


class SubmitGuessError(str, Enum):
    GAME_OVER = "game_over"
    INVALID_LENGTH = "invalid_length"
    INCOMPLETE = "incomplete"
    NOT_IN_WORD_LIST = "not_in_word_list"


@dataclass(frozen=True)
class SubmitGuessResult:
    success: bool
    session: Optional[GameSession] = None
    error: Optional[SubmitGuessError] = None
    is_win: bool = False
    is_loss: bool = False


class SubmitGuessUseCase:

    def __init__(self,
                 word_list: WordList,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository):
        self.word_list = word_list
        self.game_repository = game_repository
        self.completion_repository = completion_repository

    def execute(self, session: GameSession, guess: str) -> SubmitGuessResult:
        """
        Submit a guess for the given session.

        Returns:
            SubmitGuessResult with the new session, or the first failed check
            (game over, wrong length, blank letters, unknown word)
        """
        config = session.config

        if session.is_game_over():
            return SubmitGuessResult(False, error=SubmitGuessError.GAME_OVER)

        if len(guess) != config.length:
            return SubmitGuessResult(False, error=SubmitGuessError.INVALID_LENGTH)

        if " " in guess:
            return SubmitGuessResult(False, error=SubmitGuessError.INCOMPLETE)

        if not self.word_list.is_valid_guess(guess, config.length):
            return SubmitGuessResult(False, error=SubmitGuessError.NOT_IN_WORD_LIST)

        new_session = session.submit_guess(guess)
        persist_session(self.game_repository, new_session)

        if new_session.is_game_over() and config.is_daily():
            self.completion_repository.mark_daily_completed(config.length, config.max_rows, config.date_iso)

        return SubmitGuessResult(
            True,
            session=new_session,
            is_win=new_session.status is GameStatus.WON,
            is_loss=new_session.status is GameStatus.LOST,
        )
