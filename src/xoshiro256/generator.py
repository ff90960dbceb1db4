"""The xoshiro256+ generator and the utilities derived from it.

Example:
    >>> rng = Xoshiro256.from_words(1, 2, 3, 4)
    >>> rng.next_u64()
    5
    >>> rng.random_int(10, 20) in range(10, 21)
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Self

from xoshiro256 import seeding
from xoshiro256._core import JUMP, LONG_JUMP, MASK64, Words, jump_words
from xoshiro256.entropy import os_random_bytes
from xoshiro256.errors import U64_RANGE, check_length, check_range
from xoshiro256.state import GeneratorState

__all__ = ['Xoshiro256']

logger = logging.getLogger(__name__)

_TWO_POW_53 = float(1 << 53)


class Xoshiro256:
    """xoshiro256+ pseudo-random number generator.

    Not cryptographically secure. Each instance owns its 256-bit state
    exclusively and has no internal locking: share one across threads only
    behind your own lock.

    Construction:
        - ``Xoshiro256(seed)`` / :meth:`from_seed`: one 64-bit seed expanded
          with SplitMix64.
        - :meth:`from_words`: four explicit state words.
        - ``Xoshiro256()`` / :meth:`from_entropy`: 32 bytes from an entropy
          source.
        - :meth:`from_state`: a :class:`GeneratorState` snapshot.

    :meth:`seed` and :meth:`seed_words` reseed an existing instance the same
    way.

    The generator is also an infinite iterator of 64-bit words.
    """

    __slots__ = ('_s0', '_s1', '_s2', '_s3')

    def __init__(self, seed: int | None = None) -> None:
        """Seed from ``seed`` or, when None, from the configured entropy source.

        Raises:
            InvalidSeedError: If ``seed`` is outside ``[0, 2**64)``.
            InsufficientEntropyError: If the entropy source returned a short read.
        """
        self.seed(seed)

    # --- Construction ---

    @classmethod
    def from_seed(cls, seed: int) -> Self:
        """Create a generator from one 64-bit seed."""
        return cls(seed)

    @classmethod
    def from_words(cls, s0: int, s1: int, s2: int, s3: int) -> Self:
        """Create a generator whose state is exactly ``(s0, s1, s2, s3)``.

        Raises:
            InvalidSeedError: If all four words are zero or one is out of range.
        """
        rng = cls.__new__(cls)
        rng.seed_words(s0, s1, s2, s3)
        return rng

    @classmethod
    def from_entropy(cls, data: bytes | None = None) -> Self:
        """Create a generator from 32 entropy bytes (little-endian words).

        Args:
            data: Exactly 32 bytes. Read from the configured entropy source if None.

        Raises:
            InsufficientEntropyError: If ``data`` is not exactly 32 bytes.
            InvalidSeedError: If every byte is zero.
        """
        if data is None:
            data = os_random_bytes()
        rng = cls.__new__(cls)
        rng._load(seeding.words_from_entropy(data), 'entropy')
        return rng

    @classmethod
    def from_state(cls, state: GeneratorState) -> Self:
        """Create a generator resuming from a saved state."""
        rng = cls.__new__(cls)
        rng._load(state.validate().words, 'state')
        return rng

    def _load(self, words: Words, source: str) -> None:
        self._s0, self._s1, self._s2, self._s3 = words
        logger.debug('generator seeded', extra={'seed_source': source})

    # --- Reseeding ---

    def seed(self, seed: int | None = None) -> None:
        """Reseed in place, exactly as ``Xoshiro256(seed)`` would have.

        The current state is kept if ``seed`` is rejected.

        Raises:
            InvalidSeedError: If ``seed`` is outside ``[0, 2**64)``.
            InsufficientEntropyError: If the entropy source returned a short read.
        """
        if seed is None:
            self._load(seeding.words_from_entropy(os_random_bytes()), 'entropy')
        else:
            self._load(seeding.expand_seed(seed), 'splitmix64')

    def seed_words(self, s0: int, s1: int, s2: int, s3: int) -> None:
        """Replace the state with ``(s0, s1, s2, s3)`` as given.

        Raises:
            InvalidSeedError: If all four words are zero or one is out of range.
        """
        self._load(seeding.seed_words((s0, s1, s2, s3)), 'words')

    # --- State ---

    def getstate(self) -> GeneratorState:
        """Snapshot the current state."""
        return GeneratorState(self._s0, self._s1, self._s2, self._s3)

    def setstate(self, state: GeneratorState) -> None:
        """Restore a snapshot taken with :meth:`getstate`.

        Raises:
            InvalidSeedError: If ``state`` is all zero or holds out-of-range words.
        """
        self._load(state.validate().words, 'state')

    def jump(self) -> None:
        """Advance the state by 2**128 steps."""
        self._s0, self._s1, self._s2, self._s3 = jump_words(self._words(), JUMP)
        logger.debug('generator jumped', extra={'distance': '2**128'})

    def long_jump(self) -> None:
        """Advance the state by 2**192 steps."""
        self._s0, self._s1, self._s2, self._s3 = jump_words(self._words(), LONG_JUMP)
        logger.debug('generator jumped', extra={'distance': '2**192'})

    def spawn(self) -> Self:
        """Split off an independent stream.

        The returned generator continues from the current state; ``self``
        jumps 2**128 steps ahead, so the two never overlap in practice.
        """
        child = type(self).from_state(self.getstate())
        self.jump()
        return child

    def _words(self) -> Words:
        return self._s0, self._s1, self._s2, self._s3

    # --- Core output ---

    def next_u64(self) -> int:
        """Return the next unsigned 64-bit word and advance the state."""
        # _core.step, inlined
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        result = (s0 + s3) & MASK64
        t = (s1 << 17) & MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = ((s3 << 45) | (s3 >> 19)) & MASK64
        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result

    def next_u32(self) -> int:
        """Return an unsigned 32-bit value taken from the high half of one draw."""
        return self.next_u64() >> 32

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    # --- Bounded sampling ---

    def _below(self, span: int) -> int:
        """Uniform int in ``[0, span)`` for ``1 <= span <= 2**64``, without bias."""
        if span == U64_RANGE:
            return self.next_u64()
        # Largest multiple of span that fits in 64 bits; draws past it are biased.
        limit = U64_RANGE - U64_RANGE % span
        x = self.next_u64()
        while x >= limit:
            x = self.next_u64()
        return x % span

    def random_int(self, low: int, high: int) -> int:
        """Return an int uniformly distributed over ``[low, high]`` inclusive.

        Uses rejection sampling, so there is no modulo bias for any span up to
        2**64.

        Raises:
            InvalidRangeError: If ``low > high`` or the range holds more than 2**64 values.
            TypeError: If a bound is not an int.
        """
        error = check_range(low, high)
        if error is not None:
            raise error.to_exception()
        return low + self._below(high - low + 1)

    # --- Derived utilities ---

    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` bytes: each draw packed little-endian, then truncated.

        Raises:
            InvalidLengthError: If ``length <= 0``.
        """
        error = check_length(length)
        if error is not None:
            raise error.to_exception()
        buf = bytearray()
        while len(buf) < length:
            buf += self.next_u64().to_bytes(8, 'little')
        return bytes(buf[:length])

    def random_float(self) -> float:
        """Return a float in ``[0, 1)`` built from the top 53 bits of one draw.

        1.0 itself is never produced.
        """
        return (self.next_u64() >> 11) / _TWO_POW_53

    def uniform(self, a: float, b: float) -> float:
        """Return a float between ``a`` and ``b``."""
        return a + (b - a) * self.random_float()

    def random_elem[T](self, seq: Sequence[T]) -> T | None:
        """Return a uniformly chosen element of ``seq``, or None if it is empty."""
        if not seq:
            return None
        return seq[self._below(len(seq))]

    def choice[T](self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of ``seq``.

        Raises:
            IndexError: If ``seq`` is empty.
        """
        if not seq:
            msg = 'Cannot choose from an empty sequence'
            raise IndexError(msg)
        return seq[self._below(len(seq))]

    def choices[T](self, population: Sequence[T], k: int = 1) -> list[T]:
        """Return ``k`` elements drawn with replacement.

        Raises:
            ValueError: If ``population`` is empty.
        """
        n = len(population)
        if n == 0:
            msg = 'Cannot choose from an empty population'
            raise ValueError(msg)
        return [population[self._below(n)] for _ in range(k)]

    def shuffle[T](self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of ``seq``; ``seq`` itself is left untouched.

        Fisher-Yates from the last position down, each swap partner drawn with
        :meth:`random_int` semantics.
        """
        shuffled = list(seq)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._below(i + 1)
            if i != j:
                shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def sample[T](self, population: Sequence[T], k: int) -> list[T]:
        """Return ``k`` elements from distinct positions of ``population``.

        Raises:
            ValueError: If ``k`` is negative or larger than the population.
        """
        n = len(population)
        if not 0 <= k <= n:
            msg = f'Sample size {k} is outside [0, {n}]'
            raise ValueError(msg)
        pool = list(population)
        for i in range(k):
            j = i + self._below(n - i)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]
