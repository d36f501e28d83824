"""
Abandon Game Use Case

Discards the saved game. An abandoned daily puzzle counts as completed so it
cannot be replayed.
"""

from dataclasses import dataclass
from typing import Optional

from ..repositories.base import CompletionRepository, GameRepository


@dataclass(frozen=True)
class AbandonedGameInfo:
    guess_count: int
    hint_was_used: bool
    mode: str
    date_iso: Optional[str]
    length: int
    max_rows: int


class AbandonGameUseCase:

    def __init__(self, game_repository: GameRepository, completion_repository: CompletionRepository):
        self.game_repository = game_repository
        self.completion_repository = completion_repository

    def execute(self) -> Optional[AbandonedGameInfo]:
        """
        Clear the saved game.

        Returns:
            Information about the discarded game, or None if nothing was saved
        """
        saved = self.game_repository.load()
        abandoned = None

        if saved:
            abandoned = AbandonedGameInfo(
                guess_count=len(saved.rows),
                hint_was_used=saved.hint_used,
                mode=saved.mode,
                date_iso=saved.date_iso,
                length=saved.length,
                max_rows=saved.max_rows,
            )

            if saved.mode == "daily" and saved.date_iso:
                self.completion_repository.mark_daily_completed(saved.length, saved.max_rows, saved.date_iso)

        self.game_repository.clear()
        return abandoned
