"""
Game Module

Composition root for the game: owns the shared services and word list and
builds per-player repositories and use cases. Nothing here is a process-wide
singleton; the Flask app keeps its module in app.extensions.
"""

from typing import Callable, Dict, Mapping, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from .repositories.base import CompletionRepository, GameRepository, WordList
from .repositories.memory import InMemoryCompletionRepository, InMemoryGameRepository
from .repositories.mongo import (
    COMPLETIONS_COLLECTION, GAMES_COLLECTION,
    MongoCompletionRepository, MongoGameRepository, ensure_indexes
)
from .repositories.word_list import StaticWordList
from .services.guess_evaluator import GuessEvaluator
from .services.hint_provider import HintProvider
from .services.word_selector import WordSelector
from .use_cases import AbandonGameUseCase, StartGameUseCase, SubmitGuessUseCase, UseHintUseCase


class GameModule:
    """Wires the game core to its collaborators."""

    def __init__(self,
                 word_list: WordList,
                 game_repository_factory: Callable[[str], GameRepository],
                 completion_repository_factory: Callable[[str], CompletionRepository],
                 evaluator: Optional[GuessEvaluator] = None,
                 word_selector: Optional[WordSelector] = None,
                 hint_provider: Optional[HintProvider] = None,
                 storage_backend: str = "custom"):
        """
        Args:
            word_list: Word list shared by every player
            game_repository_factory: player id -> GameRepository
            completion_repository_factory: player id -> CompletionRepository
            evaluator: Guess evaluator (default GuessEvaluator())
            word_selector: Word selector (default over word_list)
            hint_provider: Hint provider (default HintProvider())
            storage_backend: Name reported by the health check
        """
        self.word_list = word_list
        self.game_repository_factory = game_repository_factory
        self.completion_repository_factory = completion_repository_factory
        self.evaluator = evaluator or GuessEvaluator()
        self.word_selector = word_selector or WordSelector(word_list)
        self.hint_provider = hint_provider or HintProvider()
        self.storage_backend = storage_backend

    @classmethod
    def in_memory(cls, word_list: Optional[WordList] = None, **kwargs) -> "GameModule":
        """Module whose players all share one dict-backed store."""
        store: Dict = {}
        return cls(
            word_list or StaticWordList(),
            lambda player_id: InMemoryGameRepository(store, player_id),
            lambda player_id: InMemoryCompletionRepository(store, player_id),
            storage_backend="memory",
            **kwargs
        )

    @classmethod
    def with_mongo(cls, mongo_uri: str, db_name: str, word_list: Optional[WordList] = None, **kwargs) -> "GameModule":
        """
        Module backed by MongoDB.

        Raises:
            ValueError: If no connection string is given
        """
        if not mongo_uri:
            raise ValueError("MONGO_URI is required for the mongo storage backend")

        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        db = client[db_name]
        ensure_indexes(db)

        games = db[GAMES_COLLECTION]
        completions = db[COMPLETIONS_COLLECTION]
        return cls(
            word_list or StaticWordList(),
            lambda player_id: MongoGameRepository(games, player_id),
            lambda player_id: MongoCompletionRepository(completions, player_id),
            storage_backend="mongo",
            **kwargs
        )

    @classmethod
    def from_config(cls, config: Mapping) -> "GameModule":
        """
        Build the module described by a Flask config mapping.

        Raises:
            ValueError: If STORAGE_BACKEND is unknown
        """
        backend = config.get('STORAGE_BACKEND', 'memory')
        if backend == 'memory':
            return cls.in_memory()
        if backend == 'mongo':
            return cls.with_mongo(config.get('MONGO_URI'), config.get('MONGO_DB_NAME', 'wrathword'))
        raise ValueError(f"Unknown storage backend: {backend}")

    # Repositories

    def game_repository(self, player_id: str) -> GameRepository:
        return self.game_repository_factory(player_id)

    def completion_repository(self, player_id: str) -> CompletionRepository:
        return self.completion_repository_factory(player_id)

    # Use cases

    def start_game(self, player_id: str) -> StartGameUseCase:
        return StartGameUseCase(
            self.word_list,
            self.game_repository(player_id),
            self.completion_repository(player_id),
            self.word_selector,
            self.evaluator,
        )

    def submit_guess(self, player_id: str) -> SubmitGuessUseCase:
        return SubmitGuessUseCase(
            self.word_list,
            self.game_repository(player_id),
            self.completion_repository(player_id),
        )

    def use_hint(self, player_id: str) -> UseHintUseCase:
        return UseHintUseCase(self.game_repository(player_id), self.hint_provider)

    def abandon_game(self, player_id: str) -> AbandonGameUseCase:
        return AbandonGameUseCase(self.game_repository(player_id), self.completion_repository(player_id))
