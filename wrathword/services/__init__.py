"""
Services Package

Contains the pure game services: seeded word selection, guess evaluation,
hint selection and keyboard-state tracking.
"""

from .seeded_random import fnv1a_32, mulberry32, seeded_index
from .guess_evaluator import GuessEvaluator
from .keyboard_tracker import accumulate
from .hint_provider import Hint, HintProvider
from .word_selector import WordSelector, select_daily

__all__ = [
    'fnv1a_32', 'mulberry32', 'seeded_index',
    'GuessEvaluator',
    'accumulate',
    'Hint', 'HintProvider',
    'WordSelector', 'select_daily'
]
