"""
Keyboard State Tracker

Folds guess feedback into the best-known state of each letter. Status can
only progress in priority order (absent -> present -> correct).
"""

from typing import Dict, Iterable, Mapping

from ..models.tile_state import TileState


def accumulate(current_states: Mapping[str, TileState],
               feedback: Iterable[TileState],
               guess: str) -> Dict[str, TileState]:
    """
    Merge one guess into the keyboard states.

    Args:
        current_states: Letter -> best state so far (left untouched)
        feedback: Tile states of the guess, in position order
        guess: The guessed word

    Returns:
        New mapping with every letter of the guess at its highest known state
    """
    updated = dict(current_states)
    for letter, new_state in zip(guess.upper(), feedback):
        current_state = updated.get(letter)
        if current_state is None or TileState.compare(new_state, current_state) > 0:
            updated[letter] = new_state
    return updated
