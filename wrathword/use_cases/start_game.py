"""
Start Game Use Case

Starts a new game or restores the saved one, detecting stale daily games and
refusing daily puzzles that were already finished.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.errors import CorruptSnapshotError
from ..models.game_config import GameConfig
from ..models.game_session import GameSession
from ..repositories.base import CompletionRepository, GameRepository, GameSnapshot, WordList
from ..services.guess_evaluator import GuessEvaluator
from ..services.word_selector import WordSelector
from .snapshots import persist_session, restore_session

logger = logging.getLogger(__name__)


class StartOutcome(str, Enum):
    NEW_GAME = "new_game"
    RESTORED = "restored"
    STALE_GAME = "stale_game"
    ALREADY_COMPLETED = "already_completed"


@dataclass(frozen=True)
class StartGameResult:
    """
    Outcome of starting a game.

    For STALE_GAME, `stale_session` is the unfinished game from an earlier
    date and `session` a fresh game for the requested date; neither is
    persisted and the caller decides which one to keep.
    """
    outcome: StartOutcome
    session: Optional[GameSession] = None
    stale_session: Optional[GameSession] = None


class StartGameUseCase:

    def __init__(self,
                 word_list: WordList,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository,
                 word_selector: WordSelector,
                 evaluator: GuessEvaluator):
        self.word_list = word_list
        self.game_repository = game_repository
        self.completion_repository = completion_repository
        self.word_selector = word_selector
        self.evaluator = evaluator

    def execute(self, config: GameConfig) -> StartGameResult:
        if config.is_daily() and self.completion_repository.is_daily_completed(
                config.length, config.max_rows, config.date_iso):
            return StartGameResult(StartOutcome.ALREADY_COMPLETED)

        saved = self.game_repository.load()

        if saved and self._is_config_match(saved, config):
            if config.is_daily() and saved.date_iso != config.date_iso:
                return self._handle_stale_game(saved, config)

            try:
                session = restore_session(saved, self.evaluator)
            except CorruptSnapshotError as e:
                logger.warning("Discarding saved game: %s", e)
                self.game_repository.clear()
            else:
                if not (config.is_free_play() and session.is_game_over()):
                    return StartGameResult(StartOutcome.RESTORED, session)

        return StartGameResult(StartOutcome.NEW_GAME, self._start_new_session(config))

    @staticmethod
    def _is_config_match(saved: GameSnapshot, config: GameConfig) -> bool:
        return (
            saved.length == config.length
            and saved.max_rows == config.max_rows
            and saved.mode == config.mode.value
        )

    def _handle_stale_game(self, saved: GameSnapshot, config: GameConfig) -> StartGameResult:
        # No progress on the old date: replace it silently
        if not saved.rows:
            return StartGameResult(StartOutcome.NEW_GAME, self._start_new_session(config))

        try:
            stale_session = restore_session(saved, self.evaluator)
        except CorruptSnapshotError as e:
            logger.warning("Discarding stale saved game: %s", e)
            self.game_repository.clear()
            return StartGameResult(StartOutcome.NEW_GAME, self._start_new_session(config))

        return StartGameResult(
            StartOutcome.STALE_GAME,
            session=self._create_session(config),
            stale_session=stale_session,
        )

    def _create_session(self, config: GameConfig) -> GameSession:
        word = self.word_selector.select_word(config)
        return GameSession.create(config, word, self.evaluator)

    def _start_new_session(self, config: GameConfig) -> GameSession:
        session = self._create_session(config)
        persist_session(self.game_repository, session)
        return session
