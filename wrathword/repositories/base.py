"""
Repository Interfaces

Abstract collaborators the game core is wired to: the word list, the
current-game store and the daily-completion store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.errors import CorruptSnapshotError


@dataclass
class GameSnapshot:
    """
    Persisted form of a GameSession.

    Field names mirror the session; `rows` holds the guesses and `feedback`
    the tile state values of every row.
    """
    length: int
    max_rows: int
    mode: str
    date_iso: Optional[str]
    answer: str
    rows: List[str] = field(default_factory=list)
    feedback: List[List[str]] = field(default_factory=list)
    status: str = "playing"
    hint_used: bool = False
    hinted_cell: Optional[Dict[str, int]] = None
    hinted_letter: Optional[str] = None

    @classmethod
    def from_session(cls, session) -> "GameSnapshot":
        config = session.config
        cell = session.hinted_cell
        return cls(
            length=config.length,
            max_rows=config.max_rows,
            mode=config.mode.value,
            date_iso=config.date_iso,
            answer=session.answer,
            rows=list(session.guesses),
            feedback=[row.to_list() for row in session.feedback],
            status=session.status.value,
            hint_used=session.hint_used,
            hinted_cell={"row": cell.row, "col": cell.col} if cell else None,
            hinted_letter=session.hinted_letter,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "max_rows": self.max_rows,
            "mode": self.mode,
            "date_iso": self.date_iso,
            "answer": self.answer,
            "rows": list(self.rows),
            "feedback": [list(row) for row in self.feedback],
            "status": self.status,
            "hint_used": self.hint_used,
            "hinted_cell": dict(self.hinted_cell) if self.hinted_cell else None,
            "hinted_letter": self.hinted_letter,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GameSnapshot":
        """
        Rebuild a snapshot from stored data.

        Raises:
            CorruptSnapshotError: If essential fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise CorruptSnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")

        expected = {
            "length": int,
            "max_rows": int,
            "mode": str,
            "answer": str,
            "rows": list,
            "feedback": list,
            "status": str,
            "hint_used": bool,
        }
        for name, expected_type in expected.items():
            if not isinstance(data.get(name), expected_type):
                raise CorruptSnapshotError(f"Snapshot field '{name}' is missing or not a {expected_type.__name__}")

        date_iso = data.get("date_iso")
        if date_iso is not None and not isinstance(date_iso, str):
            raise CorruptSnapshotError("Snapshot field 'date_iso' must be a string")

        if not all(isinstance(row, str) for row in data["rows"]):
            raise CorruptSnapshotError("Snapshot field 'rows' must only hold strings")

        if not all(isinstance(row, list) and all(isinstance(state, str) for state in row)
                   for row in data["feedback"]):
            raise CorruptSnapshotError("Snapshot field 'feedback' must only hold lists of strings")

        hinted_letter = data.get("hinted_letter")
        if hinted_letter is not None and not isinstance(hinted_letter, str):
            raise CorruptSnapshotError("Snapshot field 'hinted_letter' must be a string")

        hinted_cell = data.get("hinted_cell")
        if hinted_cell is not None:
            if not isinstance(hinted_cell, dict) or not {"row", "col"} <= hinted_cell.keys():
                raise CorruptSnapshotError("Snapshot field 'hinted_cell' must have row and col")
            try:
                hinted_cell = {"row": int(hinted_cell["row"]), "col": int(hinted_cell["col"])}
            except (TypeError, ValueError) as e:
                raise CorruptSnapshotError(f"Snapshot field 'hinted_cell' must hold integers: {e}") from e

        return cls(
            length=data["length"],
            max_rows=data["max_rows"],
            mode=data["mode"],
            date_iso=date_iso,
            answer=data["answer"],
            rows=list(data["rows"]),
            feedback=[list(row) for row in data["feedback"]],
            status=data["status"],
            hint_used=data["hint_used"],
            hinted_cell=hinted_cell,
            hinted_letter=hinted_letter,
        )


class WordList(ABC):
    """Access to answer and allowed-guess lists."""

    @abstractmethod
    def get_answers(self, length: int) -> List[str]:
        """Ordered answer words for a length (order matters for daily selection)."""

    @abstractmethod
    def is_valid_guess(self, word: str, length: int) -> bool:
        """Check whether a word is accepted as a guess for a length."""

    @abstractmethod
    def get_answer_count(self, length: int) -> int:
        """Number of answers available for a length."""


class GameRepository(ABC):
    """Storage slot for the current game of one player."""

    @abstractmethod
    def save(self, snapshot: GameSnapshot) -> None:
        pass

    @abstractmethod
    def load(self) -> Optional[GameSnapshot]:
        """Saved snapshot, or None if nothing is saved or the data is unreadable."""

    @abstractmethod
    def clear(self) -> None:
        pass

    def has_saved_game(self) -> bool:
        return self.load() is not None


class CompletionRepository(ABC):
    """
    Tracks finished daily puzzles to block replays.

    max_rows is part of the key because it is part of the daily seed.
    """

    @abstractmethod
    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        pass

    @abstractmethod
    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        pass

    @abstractmethod
    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        pass

    @abstractmethod
    def get_completed_dates(self, length: int) -> List[str]:
        """Sorted, de-duplicated dates with a completed daily puzzle for a length."""
