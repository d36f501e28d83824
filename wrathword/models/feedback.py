"""
Feedback Model

The evaluation of one complete guess: one TileState per letter position.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .tile_state import TileState

EMOJI_MAP = {
    TileState.CORRECT: "\U0001F7E9",  # green square
    TileState.PRESENT: "\U0001F7E8",  # yellow square
    TileState.ABSENT: "⬛",       # black square
}


@dataclass(frozen=True)
class Feedback:
    """Immutable row of tile states for a single guess."""
    states: Tuple[TileState, ...]

    @classmethod
    def from_states(cls, states: Iterable[Union[TileState, str]]) -> "Feedback":
        """
        Build a Feedback from tile states or their string values.

        Raises:
            ValueError: If any value is not a known tile state
        """
        return cls(tuple(TileState(state) for state in states))

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    def at(self, index: int) -> Optional[TileState]:
        if index < 0 or index >= len(self.states):
            return None
        return self.states[index]

    def is_win(self) -> bool:
        return bool(self.states) and all(state is TileState.CORRECT for state in self.states)

    def count_by_state(self, state: TileState) -> int:
        return sum(1 for s in self.states if s is state)

    def to_share_emoji(self) -> str:
        return "".join(EMOJI_MAP[state] for state in self.states)

    def to_list(self) -> List[str]:
        """String values, in position order, for JSON storage."""
        return [state.value for state in self.states]
