"""
Word Selector

Daily answers are picked deterministically from the date, word length and
row count, so every player gets the same word for the same puzzle. Free play
answers are picked at random.
"""

import random
from typing import Optional, Sequence

from ..models.game_config import GameConfig
from .seeded_random import seeded_index


def select_daily(length: int, max_rows: int, date_iso: str, answers: Sequence[str]) -> str:
    """
    Select the daily answer.

    The seed is "{date_iso}:{length}:{max_rows}"; changing any one part
    changes the selected word.

    Raises:
        ValueError: If answers is empty
    """
    if not answers:
        raise ValueError("Answer list cannot be empty")

    index = seeded_index(f"{date_iso}:{length}:{max_rows}", len(answers))
    return answers[index]


class WordSelector:
    """Selects the answer for a game configuration from a word list."""

    def __init__(self, word_list, rng: Optional[random.Random] = None):
        """
        Args:
            word_list: WordList providing the answers for each length
            rng: Random source for free play (a fresh Random if omitted)
        """
        self.word_list = word_list
        self.rng = rng or random.Random()

    def select_word(self, config: GameConfig) -> str:
        answers = self.word_list.get_answers(config.length)
        if config.is_daily():
            return select_daily(config.length, config.max_rows, config.date_iso, answers)

        if not answers:
            raise ValueError(f"No answers available for length {config.length}")
        return self.rng.choice(answers)
