"""
Seeded Random

Deterministic index generation from a string seed: a 32-bit FNV-1a hash of
the seed feeds a mulberry32 generator. Every step is masked to 32 bits so the
results match the historical daily words bit for bit.
"""

from typing import Callable

MASK_32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    """32-bit wraparound multiplication."""
    return (a * b) & MASK_32


def _code_units(text: str):
    # UTF-16 code units; identical to code points for BMP text
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def fnv1a_32(text: str) -> int:
    """Unsigned 32-bit FNV-1a hash of a string."""
    h = FNV_OFFSET_BASIS
    for unit in _code_units(text):
        h ^= unit
        h = _imul(h, FNV_PRIME)
    return h


def mulberry32(seed: int) -> Callable[[], float]:
    """
    Create a mulberry32 generator.

    Args:
        seed: 32-bit unsigned seed

    Returns:
        Function returning the next float in [0, 1) on each call
    """
    state = seed & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + MULBERRY_INCREMENT) & MASK_32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

    return next_float


def seeded_index(seed: str, upper_bound_exclusive: int) -> int:
    """
    Deterministically map a seed string to an index in [0, upper_bound_exclusive).

    Raises:
        ValueError: If the bound is smaller than 1
    """
    if upper_bound_exclusive < 1:
        raise ValueError(f"upper_bound_exclusive must be at least 1, got {upper_bound_exclusive}")

    rnd = mulberry32(fnv1a_32(seed))()
    return int(rnd * upper_bound_exclusive)
