"""
Game Session Model

The aggregate for a single game. A session is never changed in place:
submit_guess and use_hint return a new session and leave the receiver as it
was, so an old reference is a faithful piece of history.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from ..services.keyboard_tracker import accumulate
from .errors import GameOverError, HintAlreadyUsedError
from .feedback import Feedback
from .game_config import GameConfig
from .hint_cell import HintCell
from .tile_state import TileState

if TYPE_CHECKING:
    from ..services.guess_evaluator import GuessEvaluator


class GameStatus(Enum):
    """Session status. Only PLAYING can change, and only to WON or LOST."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameSession:
    """Immutable game state for one configuration and one secret answer."""
    config: GameConfig
    answer: str
    evaluator: "GuessEvaluator" = field(compare=False, repr=False)
    guesses: Tuple[str, ...] = ()
    feedback: Tuple[Feedback, ...] = ()
    status: GameStatus = GameStatus.PLAYING
    hint_used: bool = False
    hinted_cell: Optional[HintCell] = None
    hinted_letter: Optional[str] = None
    keyboard_states: Mapping[str, TileState] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(cls, config: GameConfig, answer: str, evaluator: "GuessEvaluator") -> "GameSession":
        """
        Start a new session.

        Args:
            config: Validated game configuration
            answer: Secret word, stored uppercased
            evaluator: GuessEvaluator used for every guess of this session
        """
        return cls(config=config, answer=answer.upper(), evaluator=evaluator)

    @property
    def current_row(self) -> int:
        return len(self.guesses)

    @property
    def remaining_guesses(self) -> int:
        return self.config.max_rows - self.current_row

    def can_submit_guess(self) -> bool:
        return self.status is GameStatus.PLAYING

    def is_game_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def submit_guess(self, guess: str) -> "GameSession":
        """
        Evaluate a guess and return the resulting session.

        Raises:
            GameOverError: If the game is already won or lost
        """
        if self.is_game_over():
            raise GameOverError()

        normalized_guess = guess.upper()
        new_feedback = self.evaluator.evaluate(self.answer, normalized_guess)
        keyboard = accumulate(self.keyboard_states, new_feedback, normalized_guess)

        if new_feedback.is_win():
            new_status = GameStatus.WON
        elif self.current_row + 1 >= self.config.max_rows:
            new_status = GameStatus.LOST
        else:
            new_status = GameStatus.PLAYING

        return replace(
            self,
            guesses=self.guesses + (normalized_guess,),
            feedback=self.feedback + (new_feedback,),
            status=new_status,
            keyboard_states=MappingProxyType(keyboard),
        )

    def use_hint(self, cell, letter: str) -> "GameSession":
        """
        Record the hint chosen by the HintProvider.

        Args:
            cell: HintCell or (row, col) pair of the revealed tile
            letter: Revealed letter

        Raises:
            HintAlreadyUsedError: If this session already used its hint
        """
        if self.hint_used:
            raise HintAlreadyUsedError()

        return replace(
            self,
            hint_used=True,
            hinted_cell=HintCell(*cell),
            hinted_letter=letter.upper(),
        )

    def to_share_string(self) -> str:
        if self.status is GameStatus.WON:
            score = f"{self.current_row}/{self.config.max_rows}"
        else:
            score = f"X/{self.config.max_rows}"

        grid = "\n".join(row.to_share_emoji() for row in self.feedback)
        return f"{score}\n\n{grid}"
