"""
Tests for the GameModule composition root.
"""

import pytest

from wrathword.game_module import GameModule
from wrathword.repositories import InMemoryCompletionRepository, InMemoryGameRepository
from wrathword.use_cases import StartOutcome


def test_in_memory_module(hello_word_list):
    module = GameModule.in_memory(hello_word_list)

    assert module.storage_backend == "memory"
    assert isinstance(module.game_repository("alice"), InMemoryGameRepository)
    assert isinstance(module.completion_repository("alice"), InMemoryCompletionRepository)


def test_players_share_store_but_not_games(hello_word_list, daily_config):
    module = GameModule.in_memory(hello_word_list)

    module.start_game("alice").execute(daily_config)

    assert module.game_repository("alice").has_saved_game()
    assert not module.game_repository("bob").has_saved_game()


def test_full_round_through_module(hello_word_list, daily_config):
    module = GameModule.in_memory(hello_word_list)

    session = module.start_game("alice").execute(daily_config).session
    session = module.use_hint("alice").execute(session).session
    result = module.submit_guess("alice").execute(session, "HELLO")

    assert result.is_win
    assert module.completion_repository("alice").is_daily_completed(5, 6, "2025-01-15")
    assert module.start_game("alice").execute(daily_config).outcome is StartOutcome.ALREADY_COMPLETED
    assert module.start_game("bob").execute(daily_config).outcome is StartOutcome.NEW_GAME


def test_abandon_through_module(hello_word_list, daily_config):
    module = GameModule.in_memory(hello_word_list)
    module.start_game("alice").execute(daily_config)

    info = module.abandon_game("alice").execute()
    assert info.guess_count == 0
    assert not module.game_repository("alice").has_saved_game()


def test_default_services(hello_word_list):
    module = GameModule.in_memory(hello_word_list)
    assert module.evaluator is not None
    assert module.hint_provider is not None
    assert module.word_selector.word_list is hello_word_list


def test_from_config_memory():
    module = GameModule.from_config({'STORAGE_BACKEND': 'memory'})
    assert module.storage_backend == "memory"
    assert module.word_list.get_answer_count(5) > 0


def test_from_config_unknown_backend():
    with pytest.raises(ValueError):
        GameModule.from_config({'STORAGE_BACKEND': 'redis'})


def test_mongo_requires_uri():
    with pytest.raises(ValueError):
        GameModule.with_mongo(None, 'wrathword')
