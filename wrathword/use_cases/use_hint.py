"""
Use Hint Use Case

Asks the HintProvider for a letter, records it on the session and persists.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.errors import HintUnavailableError
from ..models.game_session import GameSession
from ..models.hint_cell import HintCell
from ..repositories.base import GameRepository
from ..services.hint_provider import HintProvider
from .snapshots import persist_session


class UseHintError(str, Enum):
    ALREADY_USED = "already_used"
    GAME_OVER = "game_over"
    NO_HINT_AVAILABLE = "no_hint_available"


@dataclass(frozen=True)
class UseHintResult:
    success: bool
    session: Optional[GameSession] = None
    position: Optional[HintCell] = None
    letter: Optional[str] = None
    error: Optional[UseHintError] = None


class UseHintUseCase:

    def __init__(self, game_repository: GameRepository, hint_provider: HintProvider):
        self.game_repository = game_repository
        self.hint_provider = hint_provider

    def execute(self, session: GameSession) -> UseHintResult:
        if session.is_game_over():
            return UseHintResult(False, error=UseHintError.GAME_OVER)

        if session.hint_used:
            return UseHintResult(False, error=UseHintError.ALREADY_USED)

        try:
            hint = self.hint_provider.get_hint(session.answer, session.current_row, session.feedback)
        except HintUnavailableError:
            return UseHintResult(False, error=UseHintError.NO_HINT_AVAILABLE)

        new_session = session.use_hint(hint.position, hint.letter)
        persist_session(self.game_repository, new_session)

        return UseHintResult(True, session=new_session, position=hint.position, letter=hint.letter)
