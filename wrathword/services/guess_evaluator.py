"""
Guess Evaluator

Implements the authentic Wordle letter evaluation algorithm.
"""

from typing import Dict, List

from ..models.feedback import Feedback
from ..models.tile_state import TileState


class GuessEvaluator:
    """
    Two-pass evaluation with Wordle duplicate-letter semantics.

    Pass 1 marks exact position matches as correct and counts the answer
    letters left unmatched. Pass 2 walks the remaining positions left to right
    and marks a letter present only while unmatched copies remain, so surplus
    duplicates in the guess come out absent.
    """

    def evaluate(self, answer: str, guess: str) -> Feedback:
        """
        Evaluate a guess against the answer.

        Raises:
            ValueError: If the guess and answer lengths differ
        """
        ans = answer.lower()
        gss = guess.lower()
        if len(ans) != len(gss):
            raise ValueError(f"Guess '{guess}' must be {len(ans)} letters long")

        result: List[TileState] = [TileState.ABSENT] * len(ans)
        remaining: Dict[str, int] = {}

        # First pass: exact matches
        for i, (a, g) in enumerate(zip(ans, gss)):
            if g == a:
                result[i] = TileState.CORRECT
            else:
                remaining[a] = remaining.get(a, 0) + 1

        # Second pass: present letters, leftmost first
        for i, g in enumerate(gss):
            if result[i] is TileState.CORRECT:
                continue
            if remaining.get(g, 0) > 0:
                result[i] = TileState.PRESENT
                remaining[g] -= 1

        return Feedback(tuple(result))
