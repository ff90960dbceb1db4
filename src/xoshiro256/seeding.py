"""Expansion of seed material into a full xoshiro256+ state.

Three paths lead to a state:

- a single 64-bit seed, expanded with SplitMix64 so that nearby seeds give
  decorrelated states (:func:`expand_seed`);
- four explicit words, used as-is once validated (:func:`seed_words`);
- 32 bytes from an entropy source, read as four little-endian words
  (:func:`words_from_entropy`).

All three are bit-exact across implementations: the same input always gives
the same state.
"""

from __future__ import annotations

from collections.abc import Sequence

from xoshiro256._core import MASK64, Words
from xoshiro256.errors import check_seed, check_words
from xoshiro256.state import GeneratorState

__all__ = [
    'GOLDEN_GAMMA',
    'expand_seed',
    'seed_words',
    'splitmix64',
    'words_from_entropy',
]

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def splitmix64(x: int) -> tuple[int, int]:
    """One SplitMix64 step.

    Args:
        x: Current SplitMix64 counter.

    Returns:
        ``(output, next_x)``.

    Example:
        >>> hex(splitmix64(0)[0])
        '0xe220a8397b1dcdaf'
    """
    x = (x + GOLDEN_GAMMA) & MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31), x


def expand_seed(seed: int) -> Words:
    """Expand one 64-bit seed into four state words.

    The four outputs come from distinct SplitMix64 counters and the output
    mix is a bijection, so at most one of them can be zero.

    Raises:
        InvalidSeedError: If ``seed`` is outside ``[0, 2**64)``.
        TypeError: If ``seed`` is not an int.
    """
    error = check_seed(seed)
    if error is not None:
        raise error.to_exception()
    s0, x = splitmix64(seed)
    s1, x = splitmix64(x)
    s2, x = splitmix64(x)
    s3, _ = splitmix64(x)
    return s0, s1, s2, s3


def seed_words(words: Sequence[int]) -> Words:
    """Validate four explicit state words.

    Raises:
        InvalidSeedError: If there are not four in-range words or all are zero.
        TypeError: If a word is not an int.
    """
    error = check_words(words)
    if error is not None:
        raise error.to_exception()
    s0, s1, s2, s3 = words
    return s0, s1, s2, s3


def words_from_entropy(data: bytes) -> Words:
    """Read 32 entropy bytes as four little-endian state words.

    Raises:
        InsufficientEntropyError: If ``data`` is not exactly 32 bytes.
        InvalidSeedError: If every byte is zero.
    """
    return GeneratorState.from_bytes(data).words
