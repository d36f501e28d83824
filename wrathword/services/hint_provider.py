"""
Hint Provider

Chooses which letter to reveal when the player asks for their one hint.
"""

from typing import NamedTuple, Sequence, Set

from ..models.errors import HintUnavailableError
from ..models.feedback import Feedback
from ..models.hint_cell import HintCell
from ..models.tile_state import TileState


class Hint(NamedTuple):
    position: HintCell
    letter: str


class HintProvider:
    """Reveals the first position not already guessed correctly in any row."""

    def get_hint(self, answer: str, current_row: int, feedback: Sequence[Feedback]) -> Hint:
        """
        Pick a hint for the current game state.

        Args:
            answer: The secret word
            current_row: Row the hint is shown on
            feedback: Feedback of every guess made so far

        Returns:
            Hint with the revealed cell and its uppercase letter

        Raises:
            HintUnavailableError: If every position is already correct
        """
        correct_positions: Set[int] = set()
        for row in feedback:
            for col, state in enumerate(row):
                if state is TileState.CORRECT:
                    correct_positions.add(col)

        for col, letter in enumerate(answer):
            if col not in correct_positions:
                return Hint(HintCell(current_row, col), letter.upper())

        raise HintUnavailableError()
