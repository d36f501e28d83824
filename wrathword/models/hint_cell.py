"""
Hint Cell Model
"""

from typing import NamedTuple


class HintCell(NamedTuple):
    """Board position of a revealed hint letter."""
    row: int
    col: int
