"""
MongoDB Repositories

Game state and daily completion storage backed by pymongo collections.
One document per player holds the current game; one document per finished
daily puzzle records completion.
"""

import datetime
import logging
from typing import List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

from ..models.errors import CorruptSnapshotError
from .base import CompletionRepository, GameRepository, GameSnapshot

logger = logging.getLogger(__name__)

GAMES_COLLECTION = "current_games"
COMPLETIONS_COLLECTION = "daily_completions"


def ensure_indexes(db: Database) -> None:
    """Create the indexes both repositories rely on."""
    db[COMPLETIONS_COLLECTION].create_index(
        [("player_id", 1), ("length", 1), ("max_rows", 1), ("date_iso", 1)],
        unique=True
    )
    db[COMPLETIONS_COLLECTION].create_index([("player_id", 1), ("length", 1)])


class MongoGameRepository(GameRepository):
    """Current game of one player, stored as a single document keyed by player id."""

    def __init__(self, collection: Collection, scope: str):
        self.collection = collection
        self.scope = scope

    def save(self, snapshot: GameSnapshot) -> None:
        document = {
            "_id": self.scope,
            "state": snapshot.to_dict(),
            "updated_at": datetime.datetime.now(datetime.timezone.utc),
        }
        self.collection.replace_one({"_id": self.scope}, document, upsert=True)

    def load(self) -> Optional[GameSnapshot]:
        document = self.collection.find_one({"_id": self.scope})
        if not document:
            return None
        try:
            return GameSnapshot.from_dict(document.get("state"))
        except CorruptSnapshotError as e:
            logger.warning("Ignoring corrupted game state for player %s: %s", self.scope, e)
            return None

    def clear(self) -> None:
        self.collection.delete_one({"_id": self.scope})


class MongoCompletionRepository(CompletionRepository):
    """Completed daily puzzles of one player."""

    def __init__(self, collection: Collection, scope: str):
        self.collection = collection
        self.scope = scope

    def _filter(self, length: int, max_rows: int, date_iso: str) -> dict:
        return {
            "player_id": self.scope,
            "length": length,
            "max_rows": max_rows,
            "date_iso": date_iso,
        }

    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        return self.collection.find_one(self._filter(length, max_rows, date_iso)) is not None

    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        self.collection.update_one(
            self._filter(length, max_rows, date_iso),
            {"$setOnInsert": {"completed_at": datetime.datetime.now(datetime.timezone.utc)}},
            upsert=True
        )

    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        self.collection.delete_one(self._filter(length, max_rows, date_iso))

    def get_completed_dates(self, length: int) -> List[str]:
        return sorted(self.collection.distinct("date_iso", {"player_id": self.scope, "length": length}))
