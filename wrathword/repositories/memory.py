"""
In-Memory Repositories

Dict-backed stores with per-player key scoping. The store dict can be shared
by many repositories; each only touches keys under its own scope.
"""

import logging
from typing import Dict, List, Optional

from ..models.errors import CorruptSnapshotError
from .base import CompletionRepository, GameRepository, GameSnapshot

logger = logging.getLogger(__name__)

GAME_STATE_KEY = "game.state"


def scoped_key(scope: str, key: str) -> str:
    return f"user.{scope}.{key}"


def completion_key(length: int, max_rows: int, date_iso: str) -> str:
    return f"daily.{length}x{max_rows}.{date_iso}.completed"


class InMemoryGameRepository(GameRepository):
    """Current game slot stored as a plain dict under a scoped key."""

    def __init__(self, store: Optional[Dict] = None, scope: str = "anonymous"):
        self.store = store if store is not None else {}
        self.key = scoped_key(scope, GAME_STATE_KEY)

    def save(self, snapshot: GameSnapshot) -> None:
        self.store[self.key] = snapshot.to_dict()

    def load(self) -> Optional[GameSnapshot]:
        data = self.store.get(self.key)
        if data is None:
            return None
        try:
            return GameSnapshot.from_dict(data)
        except CorruptSnapshotError as e:
            logger.warning("Ignoring corrupted game state at %s: %s", self.key, e)
            return None

    def clear(self) -> None:
        self.store.pop(self.key, None)


class InMemoryCompletionRepository(CompletionRepository):
    """Daily completion flags, one key per length/max_rows/date."""

    def __init__(self, store: Optional[Dict] = None, scope: str = "anonymous"):
        self.store = store if store is not None else {}
        self.scope = scope

    def _key(self, length: int, max_rows: int, date_iso: str) -> str:
        return scoped_key(self.scope, completion_key(length, max_rows, date_iso))

    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        return bool(self.store.get(self._key(length, max_rows, date_iso), False))

    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        self.store[self._key(length, max_rows, date_iso)] = True

    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        self.store.pop(self._key(length, max_rows, date_iso), None)

    def get_completed_dates(self, length: int) -> List[str]:
        prefix = scoped_key(self.scope, f"daily.{length}x")
        dates = set()
        for key, completed in self.store.items():
            if completed and key.startswith(prefix) and key.endswith(".completed"):
                # user.{scope}.daily.{length}x{max_rows}.{date}.completed
                dates.add(key[len(prefix):].split(".", 1)[1][:-len(".completed")])
        return sorted(dates)
