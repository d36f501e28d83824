"""
Tests for the start, submit, hint and abandon use cases.
"""

import pytest

from wrathword.models import CorruptSnapshotError, GameConfig, GameSession, GameStatus, HintCell
from wrathword.repositories import GameSnapshot
from wrathword.services import WordSelector
from wrathword.use_cases import (
    AbandonGameUseCase, StartGameUseCase, StartOutcome, SubmitGuessError,
    SubmitGuessUseCase, UseHintError, UseHintUseCase, persist_session, restore_session
)


@pytest.fixture
def start_game(hello_word_list, game_repository, completion_repository, evaluator):
    return StartGameUseCase(
        hello_word_list, game_repository, completion_repository,
        WordSelector(hello_word_list), evaluator
    )


@pytest.fixture
def submit_guess(hello_word_list, game_repository, completion_repository):
    return SubmitGuessUseCase(hello_word_list, game_repository, completion_repository)


@pytest.fixture
def use_hint(game_repository, hint_provider):
    return UseHintUseCase(game_repository, hint_provider)


@pytest.fixture
def abandon_game(game_repository, completion_repository):
    return AbandonGameUseCase(game_repository, completion_repository)


def daily(date_iso="2025-01-15", max_rows=6):
    return GameConfig.create(length=5, max_rows=max_rows, mode="daily", date_iso=date_iso)


class TestStartGame:

    def test_new_game_is_persisted(self, start_game, game_repository):
        result = start_game.execute(daily())

        assert result.outcome is StartOutcome.NEW_GAME
        assert result.session.answer == "HELLO"
        assert result.session.current_row == 0
        assert game_repository.load().date_iso == "2025-01-15"

    def test_restores_saved_game(self, start_game, submit_guess):
        first = start_game.execute(daily()).session
        submit_guess.execute(first, "HELPS")

        result = start_game.execute(daily())
        assert result.outcome is StartOutcome.RESTORED
        assert result.session.guesses == ("HELPS",)
        assert result.session.keyboard_states["H"].value == "correct"

    def test_already_completed(self, start_game, completion_repository):
        completion_repository.mark_daily_completed(5, 6, "2025-01-15")

        result = start_game.execute(daily())
        assert result.outcome is StartOutcome.ALREADY_COMPLETED
        assert result.session is None

    def test_stale_game_with_progress(self, start_game, submit_guess, game_repository):
        first = start_game.execute(daily("2025-01-15")).session
        submit_guess.execute(first, "HELPS")

        result = start_game.execute(daily("2025-01-16"))

        assert result.outcome is StartOutcome.STALE_GAME
        assert result.stale_session.config.date_iso == "2025-01-15"
        assert result.stale_session.guesses == ("HELPS",)
        assert result.session.config.date_iso == "2025-01-16"
        assert result.session.current_row == 0
        # the caller decides; nothing is overwritten yet
        assert game_repository.load().date_iso == "2025-01-15"

    def test_stale_game_without_progress_is_replaced(self, start_game, game_repository):
        start_game.execute(daily("2025-01-15"))

        result = start_game.execute(daily("2025-01-16"))
        assert result.outcome is StartOutcome.NEW_GAME
        assert game_repository.load().date_iso == "2025-01-16"

    def test_different_config_starts_new_game(self, start_game, submit_guess, game_repository):
        first = start_game.execute(daily(max_rows=6)).session
        submit_guess.execute(first, "HELPS")

        result = start_game.execute(daily(max_rows=5))
        assert result.outcome is StartOutcome.NEW_GAME
        assert game_repository.load().max_rows == 5
        assert game_repository.load().rows == []

    def test_unfinished_free_game_restored(self, start_game, submit_guess, free_config):
        first = start_game.execute(free_config).session
        submit_guess.execute(first, "CRANE")

        result = start_game.execute(free_config)
        assert result.outcome is StartOutcome.RESTORED
        assert result.session.guesses == ("CRANE",)

    def test_finished_free_game_not_restored(self, start_game, submit_guess, free_config):
        first = start_game.execute(free_config).session
        submit_guess.execute(first, "HELLO")

        result = start_game.execute(free_config)
        assert result.outcome is StartOutcome.NEW_GAME
        assert result.session.current_row == 0

    @pytest.mark.parametrize("changes", [
        {"rows": ["HELP"]},
        {"rows": [12345]},
        {"hint_used": True, "hinted_cell": {"row": None, "col": 0}, "hinted_letter": "H"},
        {"hint_used": True, "hinted_cell": {"row": 0, "col": 0}, "hinted_letter": 5},
    ])
    def test_corrupt_saved_game_replaced(self, start_game, store, game_repository, changes):
        data = {
            "length": 5, "max_rows": 6, "mode": "daily", "date_iso": "2025-01-15",
            "answer": "HELLO", "rows": [], "feedback": [], "status": "playing",
            "hint_used": False,
        }
        data.update(changes)
        store["user.alice.game.state"] = data

        result = start_game.execute(daily())
        assert result.outcome is StartOutcome.NEW_GAME
        assert game_repository.load().rows == []


class TestSubmitGuess:

    def test_success_persists(self, submit_guess, hello_session, game_repository):
        result = submit_guess.execute(hello_session, "helps")

        assert result.success
        assert result.error is None
        assert not result.is_win and not result.is_loss
        assert result.session.guesses == ("HELPS",)
        assert game_repository.load().rows == ["HELPS"]

    @pytest.mark.parametrize("guess, error", [
        ("HELL", SubmitGuessError.INVALID_LENGTH),
        ("HELLOS", SubmitGuessError.INVALID_LENGTH),
        ("HEL O", SubmitGuessError.INCOMPLETE),
        ("ZZZZZ", SubmitGuessError.NOT_IN_WORD_LIST),
    ])
    def test_rejected_guesses(self, submit_guess, hello_session, game_repository, guess, error):
        result = submit_guess.execute(hello_session, guess)

        assert not result.success
        assert result.error is error
        assert result.session is None
        assert game_repository.load() is None

    def test_game_over(self, submit_guess, hello_session):
        won = hello_session.submit_guess("HELLO")
        result = submit_guess.execute(won, "HELPS")
        assert result.error is SubmitGuessError.GAME_OVER

    def test_daily_win_marks_completion(self, submit_guess, hello_session, completion_repository):
        result = submit_guess.execute(hello_session, "HELLO")

        assert result.is_win
        assert completion_repository.is_daily_completed(5, 6, "2025-01-15")

    def test_daily_loss_marks_completion(self, submit_guess, evaluator, completion_repository):
        session = GameSession.create(daily(max_rows=1), "HELLO", evaluator)
        result = submit_guess.execute(session, "CRANE")

        assert result.is_loss
        assert result.session.status is GameStatus.LOST
        assert completion_repository.is_daily_completed(5, 1, "2025-01-15")

    def test_free_win_not_recorded(self, submit_guess, free_config, evaluator, completion_repository):
        session = GameSession.create(free_config, "HELLO", evaluator)
        assert submit_guess.execute(session, "HELLO").is_win
        assert completion_repository.get_completed_dates(5) == []


class TestUseHint:

    def test_success_persists(self, use_hint, hello_session, game_repository):
        result = use_hint.execute(hello_session.submit_guess("HELPS"))

        assert result.success
        assert result.position == HintCell(1, 3)
        assert result.letter == "L"
        assert result.session.hint_used
        assert game_repository.load().hinted_cell == {"row": 1, "col": 3}

    def test_already_used(self, use_hint, hello_session):
        session = use_hint.execute(hello_session).session
        assert use_hint.execute(session).error is UseHintError.ALREADY_USED

    def test_game_over(self, use_hint, hello_session):
        result = use_hint.execute(hello_session.submit_guess("HELLO"))
        assert result.error is UseHintError.GAME_OVER

    def test_no_hint_available(self, use_hint, hello_session, game_repository):
        session = hello_session.submit_guess("HELPS").submit_guess("CELLO")
        assert session.status is GameStatus.PLAYING

        result = use_hint.execute(session)
        assert result.error is UseHintError.NO_HINT_AVAILABLE
        assert game_repository.load() is None


class TestAbandonGame:

    def test_nothing_saved(self, abandon_game):
        assert abandon_game.execute() is None

    def test_daily_counts_as_completed(self, abandon_game, hello_session, game_repository, completion_repository):
        session = hello_session.use_hint((0, 0), "H").submit_guess("HELPS")
        persist_session(game_repository, session)

        info = abandon_game.execute()

        assert info.guess_count == 1
        assert info.hint_was_used
        assert (info.mode, info.date_iso, info.length, info.max_rows) == ("daily", "2025-01-15", 5, 6)
        assert completion_repository.is_daily_completed(5, 6, "2025-01-15")
        assert game_repository.load() is None

    def test_free_play_not_recorded(self, abandon_game, free_config, evaluator, game_repository,
                                    completion_repository):
        persist_session(game_repository, GameSession.create(free_config, "HELLO", evaluator))

        info = abandon_game.execute()
        assert info.mode == "free"
        assert completion_repository.get_completed_dates(5) == []
        assert game_repository.load() is None


class TestSnapshots:

    def test_restore_replays_hint_and_guesses(self, hello_session, evaluator):
        session = hello_session.use_hint((0, 0), "H").submit_guess("HELPS").submit_guess("LLAMA")
        restored = restore_session(GameSnapshot.from_session(session), evaluator)

        assert restored.config == session.config
        assert restored.guesses == session.guesses
        assert restored.feedback == session.feedback
        assert restored.status is session.status
        assert dict(restored.keyboard_states) == dict(session.keyboard_states)
        assert restored.hinted_cell == HintCell(0, 0)
        assert restored.hinted_letter == "H"

    def test_restore_finished_game(self, hello_session, evaluator):
        session = hello_session.submit_guess("HELLO")
        restored = restore_session(GameSnapshot.from_session(session), evaluator)
        assert restored.status is GameStatus.WON

    @pytest.mark.parametrize("changes", [
        {"rows": ["HELP"]},
        {"length": 9},
        {"mode": "weekly"},
        {"rows": ["HELLO", "HELPS"]},
    ])
    def test_restore_rejects_unreplayable_snapshots(self, hello_session, evaluator, changes):
        data = GameSnapshot.from_session(hello_session).to_dict()
        data.update(changes)
        with pytest.raises(CorruptSnapshotError):
            restore_session(GameSnapshot.from_dict(data), evaluator)
