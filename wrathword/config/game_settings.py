"""
Game Configuration Constants Module

Game rules and the bundled word lists. All game parameters are centralized
here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Tuple

VALID_LENGTHS: Final[Tuple[int, ...]] = (4, 5, 6)
"""Word lengths a game can be configured with."""

DEFAULT_LENGTH: Final[int] = 5
DEFAULT_MAX_ROWS: Final[int] = 6

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def _load_word_file(kind: str, length: int) -> List[str]:
    """
    Load one word list from the bundled JSON files.

    Args:
        kind: "answers" or "allowed"
        length: Word length of the list

    Returns:
        List[str]: Uppercase words, in file order

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    json_file_path = os.path.join(WORDS_DIR, f'{kind}-{length}.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{json_file_path} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {json_file_path} cannot be empty")

    return [word.upper() for word in word_list]


def load_word_lists() -> Tuple[Dict[int, List[str]], Dict[int, List[str]]]:
    """Load (answers, allowed) for every valid length."""
    answers = {length: _load_word_file('answers', length) for length in VALID_LENGTHS}
    allowed = {length: _load_word_file('allowed', length) for length in VALID_LENGTHS}
    return answers, allowed


def validate_word_list_integrity(word_lists: Dict[int, List[str]]) -> bool:
    """
    Validates the integrity and consistency of a set of word lists.

    Ensures that every word has the length of its list, contains only
    alphabetic characters, is uppercase, and appears once.

    Returns:
        bool: True if every list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    for length, words in word_lists.items():
        if not words:
            raise ValueError(f"Word list for length {length} cannot be empty")

        for index, word in enumerate(words):
            if len(word) != length:
                raise ValueError(f"Word at index {index} '{word}' is not {length} characters long")

            if not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

            if not word.isupper():
                raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

        if len(words) != len(set(words)):
            seen = set()
            duplicates = sorted({word for word in words if word in seen or seen.add(word)})
            raise ValueError(f"Duplicate words found in word list for length {length}: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        answer_lists, allowed_lists = load_word_lists()
        validate_word_list_integrity(answer_lists)
        validate_word_list_integrity(allowed_lists)
        for n in VALID_LENGTHS:
            print(f" {n} letters: {len(answer_lists[n])} answers, {len(allowed_lists[n])} allowed")
        print(" All word list validation checks passed")
    except ValueError as config_error:
        print(f" Word list validation failed: {config_error}")
        exit(1)
