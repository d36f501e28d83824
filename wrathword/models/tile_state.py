"""
Tile State Model

Per-letter evaluation result. Precedence is correct > present > absent and
is what keyboard tracking uses to decide whether a letter may be upgraded.
"""

from enum import Enum
from typing import Any


class TileState(Enum):
    """Letter evaluation status."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @staticmethod
    def compare(a: "TileState", b: "TileState") -> int:
        """Positive if a ranks above b, negative if below, zero if equal."""
        return a.precedence - b.precedence

    @staticmethod
    def best(a: "TileState", b: "TileState") -> "TileState":
        """Return the higher precedence state (a wins ties)."""
        return a if TileState.compare(a, b) >= 0 else b

    @staticmethod
    def is_valid(value: Any) -> bool:
        if isinstance(value, TileState):
            return True
        return isinstance(value, str) and value in _VALUES


_PRECEDENCE = {
    TileState.ABSENT: 0,
    TileState.PRESENT: 1,
    TileState.CORRECT: 2,
}

_VALUES = frozenset(state.value for state in TileState)
