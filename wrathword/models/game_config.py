"""
Game Configuration Model

Everything needed to start a game: word length, number of rows, mode and
(for daily puzzles) the calendar date the puzzle belongs to.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from ..config.game_settings import DEFAULT_LENGTH, DEFAULT_MAX_ROWS, VALID_LENGTHS
from .errors import InvalidConfigurationError


class GameMode(Enum):
    """Daily puzzles share one answer per date; free play does not."""
    DAILY = "daily"
    FREE = "free"


@dataclass(frozen=True)
class GameConfig:
    """
    Validated, immutable game configuration.

    Raises InvalidConfigurationError on construction when the length is not
    one of VALID_LENGTHS, max_rows is not a positive integer, or a daily game
    has no valid ISO date.
    """
    length: int
    max_rows: int
    mode: GameMode
    date_iso: Optional[str] = None

    def __post_init__(self):
        if not GameConfig.is_valid_length(self.length):
            raise InvalidConfigurationError(
                f"Invalid word length: {self.length}. "
                f"Must be one of {', '.join(str(n) for n in VALID_LENGTHS)}"
            )

        if isinstance(self.max_rows, bool) or not isinstance(self.max_rows, int) or self.max_rows < 1:
            raise InvalidConfigurationError(f"max_rows must be a positive integer, got {self.max_rows!r}")

        if not isinstance(self.mode, GameMode):
            try:
                object.__setattr__(self, "mode", GameMode(self.mode))
            except ValueError:
                raise InvalidConfigurationError(
                    f"Invalid game mode: {self.mode!r}. Must be 'daily' or 'free'"
                ) from None

        if self.date_iso is not None or self.mode is GameMode.DAILY:
            if not isinstance(self.date_iso, str) or not self.date_iso.strip():
                raise InvalidConfigurationError("date_iso is required for daily games")
            try:
                date.fromisoformat(self.date_iso)
            except ValueError:
                raise InvalidConfigurationError(
                    f"date_iso must be an ISO calendar date (YYYY-MM-DD), got {self.date_iso!r}"
                ) from None

    @classmethod
    def create(cls,
               length: int,
               max_rows: int,
               mode: Union[GameMode, str] = GameMode.DAILY,
               date_iso: Optional[str] = None) -> "GameConfig":
        return cls(length=length, max_rows=max_rows, mode=mode, date_iso=date_iso)

    @classmethod
    def create_default(cls, date_iso: str) -> "GameConfig":
        return cls(length=DEFAULT_LENGTH, max_rows=DEFAULT_MAX_ROWS, mode=GameMode.DAILY, date_iso=date_iso)

    @staticmethod
    def is_valid_length(length) -> bool:
        return not isinstance(length, bool) and length in VALID_LENGTHS

    def to_seed_string(self) -> str:
        """Seed for daily word selection. All three parts change the word."""
        return f"{self.date_iso}:{self.length}:{self.max_rows}"

    def is_daily(self) -> bool:
        return self.mode is GameMode.DAILY

    def is_free_play(self) -> bool:
        return self.mode is GameMode.FREE
