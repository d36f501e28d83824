"""
Snapshot Conversion

Moves sessions in and out of their persisted form. A session is restored by
replaying the hint and every guess through GameSession, so derived state
(feedback, status, keyboard) is always recomputed rather than trusted.
"""

from ..models.errors import CorruptSnapshotError, GameError
from ..models.game_config import GameConfig
from ..models.game_session import GameSession
from ..models.hint_cell import HintCell
from ..repositories.base import GameRepository, GameSnapshot


def session_to_snapshot(session: GameSession) -> GameSnapshot:
    return GameSnapshot.from_session(session)


def persist_session(repository: GameRepository, session: GameSession) -> None:
    repository.save(session_to_snapshot(session))


def restore_session(snapshot: GameSnapshot, evaluator) -> GameSession:
    """
    Rebuild a GameSession from a snapshot.

    Raises:
        CorruptSnapshotError: If the snapshot cannot be replayed
    """
    try:
        config = GameConfig.create(
            length=snapshot.length,
            max_rows=snapshot.max_rows,
            mode=snapshot.mode,
            date_iso=snapshot.date_iso,
        )
        session = GameSession.create(config, snapshot.answer, evaluator)

        if snapshot.hint_used and snapshot.hinted_cell and snapshot.hinted_letter:
            cell = HintCell(snapshot.hinted_cell["row"], snapshot.hinted_cell["col"])
            session = session.use_hint(cell, snapshot.hinted_letter)

        for guess in snapshot.rows:
            session = session.submit_guess(guess)
    except (GameError, ValueError) as e:
        raise CorruptSnapshotError(f"Cannot restore saved game: {e}") from e

    return session
