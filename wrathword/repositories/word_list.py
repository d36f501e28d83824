"""
Static Word List

Word lists bundled with the package, loaded once per instance.
"""

from typing import Dict, List, Optional, Set

from ..config.game_settings import load_word_lists
from .base import WordList


class StaticWordList(WordList):
    """
    Answers and allowed guesses per word length.

    Answers keep their file order (daily selection depends on it). Allowed
    guesses live in sets for O(1) lookups, and every answer is also an
    allowed guess.
    """

    def __init__(self,
                 answers: Optional[Dict[int, List[str]]] = None,
                 allowed: Optional[Dict[int, List[str]]] = None):
        if answers is None:
            answers, bundled_allowed = load_word_lists()
            allowed = bundled_allowed if allowed is None else allowed

        self.answers_map: Dict[int, List[str]] = {
            length: [word.upper() for word in words] for length, words in answers.items()
        }
        self.allowed_sets: Dict[int, Set[str]] = {
            length: {word.upper() for word in words} for length, words in self.answers_map.items()
        }
        for length, words in (allowed or {}).items():
            self.allowed_sets.setdefault(length, set()).update(word.upper() for word in words)

    def get_answers(self, length: int) -> List[str]:
        answers = self.answers_map.get(length)
        if not answers:
            raise ValueError(f"No answers available for length {length}")
        return list(answers)

    def is_valid_guess(self, word: str, length: int) -> bool:
        allowed_set = self.allowed_sets.get(length)
        if not allowed_set or len(word) != length:
            return False
        return word.upper() in allowed_set

    def get_answer_count(self, length: int) -> int:
        return len(self.answers_map.get(length, ()))
