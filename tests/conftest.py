"""
Pytest configuration and shared fixtures for the WrathWord tests.
"""

import pytest

from wrathword import create_app
from wrathword.config import TestingConfig
from wrathword.game_module import GameModule
from wrathword.models import GameConfig, GameSession
from wrathword.repositories import InMemoryCompletionRepository, InMemoryGameRepository, StaticWordList
from wrathword.services import GuessEvaluator, HintProvider, WordSelector

ANSWERS_5 = ["HELLO", "CRANE", "PLANT", "STORM", "BRICK", "TRAIN", "SLATE", "GHOST"]
ALLOWED_5 = ["HELPS", "LLAMA", "CELLO", "WORLD", "SPEED", "EERIE", "MOUSE", "ROBOT"]


class FakeCollection:
    """Minimal stand-in for a pymongo Collection, enough for the repositories."""

    def __init__(self):
        self.documents = []
        self.indexes = []

    @staticmethod
    def _matches(document, query):
        return all(document.get(key) == value for key, value in query.items())

    def find_one(self, query):
        for document in self.documents:
            if self._matches(document, query):
                return dict(document)
        return None

    def replace_one(self, query, replacement, upsert=False):
        for i, document in enumerate(self.documents):
            if self._matches(document, query):
                self.documents[i] = dict(replacement)
                return
        if upsert:
            self.documents.append(dict(replacement))

    def update_one(self, query, update, upsert=False):
        for document in self.documents:
            if self._matches(document, query):
                document.update(update.get("$set", {}))
                return
        if upsert:
            document = dict(query)
            document.update(update.get("$setOnInsert", {}))
            document.update(update.get("$set", {}))
            self.documents.append(document)

    def delete_one(self, query):
        for i, document in enumerate(self.documents):
            if self._matches(document, query):
                del self.documents[i]
                return

    def distinct(self, key, query):
        values = []
        for document in self.documents:
            if self._matches(document, query) and document.get(key) not in values:
                values.append(document.get(key))
        return values

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))


@pytest.fixture
def evaluator():
    return GuessEvaluator()


@pytest.fixture
def hint_provider():
    return HintProvider()


@pytest.fixture
def word_list():
    return StaticWordList(answers={5: ANSWERS_5}, allowed={5: ALLOWED_5})


@pytest.fixture
def hello_word_list():
    """Word list whose only 5-letter answer is HELLO, so every game is predictable."""
    return StaticWordList(answers={5: ["HELLO"]}, allowed={5: ALLOWED_5 + ANSWERS_5})


@pytest.fixture
def daily_config():
    return GameConfig.create(length=5, max_rows=6, mode="daily", date_iso="2025-01-15")


@pytest.fixture
def free_config():
    return GameConfig.create(length=5, max_rows=6, mode="free")


@pytest.fixture
def hello_session(daily_config, evaluator):
    return GameSession.create(daily_config, "hello", evaluator)


@pytest.fixture
def store():
    return {}


@pytest.fixture
def game_repository(store):
    return InMemoryGameRepository(store, "alice")


@pytest.fixture
def completion_repository(store):
    return InMemoryCompletionRepository(store, "alice")


@pytest.fixture
def word_selector(word_list):
    return WordSelector(word_list)


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def app(hello_word_list):
    return create_app(TestingConfig, game_module=GameModule.in_memory(hello_word_list))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def alice():
    return {"X-Player-Id": "alice"}
