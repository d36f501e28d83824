"""
Repositories Package

Storage and word-list collaborators of the game core: abstract interfaces
plus in-memory, MongoDB and bundled word-list implementations.
"""

from .base import CompletionRepository, GameRepository, GameSnapshot, WordList
from .memory import InMemoryCompletionRepository, InMemoryGameRepository
from .mongo import MongoCompletionRepository, MongoGameRepository, ensure_indexes
from .word_list import StaticWordList

__all__ = [
    'CompletionRepository', 'GameRepository', 'GameSnapshot', 'WordList',
    'InMemoryCompletionRepository', 'InMemoryGameRepository',
    'MongoCompletionRepository', 'MongoGameRepository', 'ensure_indexes',
    'StaticWordList'
]
