"""Immutable snapshot of the 256-bit xoshiro256+ state."""

from __future__ import annotations

import struct

import msgspec

from xoshiro256._core import Words
from xoshiro256.errors import check_entropy, check_words

__all__ = ['GeneratorState']

_LAYOUT = struct.Struct('<4Q')


class GeneratorState(msgspec.Struct, frozen=True, gc=False):
    """Four unsigned 64-bit words ``s0..s3``.

    Instances are plain values: they carry no validation of their own so that
    msgspec can decode them cheaply. Use :meth:`validate` (or go through the
    constructors below and :mod:`xoshiro256.codec`) to enforce the non-zero
    invariant.

    Example:
        >>> state = GeneratorState.from_words((1, 2, 3, 4))
        >>> state.words
        (1, 2, 3, 4)
        >>> GeneratorState.from_bytes(state.to_bytes()) == state
        True
    """

    s0: int
    s1: int
    s2: int
    s3: int

    @property
    def words(self) -> Words:
        """The state as an ``(s0, s1, s2, s3)`` tuple."""
        return self.s0, self.s1, self.s2, self.s3

    def is_zero(self) -> bool:
        """True for the all-zero fixed point, which no generator may hold."""
        return not (self.s0 or self.s1 or self.s2 or self.s3)

    def validate(self) -> GeneratorState:
        """Return ``self`` if it is a usable state.

        Raises:
            InvalidSeedError: If a word is out of range or all words are zero.
        """
        error = check_words(self.words)
        if error is not None:
            raise error.to_exception()
        return self

    def to_bytes(self) -> bytes:
        """Serialize as 32 bytes, four little-endian 64-bit words."""
        return _LAYOUT.pack(*self.words)

    @classmethod
    def from_words(cls, words: Words) -> GeneratorState:
        """Build a validated state from four words.

        Raises:
            InvalidSeedError: If the words cannot form a valid state.
        """
        return cls(*words).validate()

    @classmethod
    def from_bytes(cls, data: bytes) -> GeneratorState:
        """Build a validated state from 32 little-endian bytes.

        Raises:
            InsufficientEntropyError: If ``data`` is not exactly 32 bytes.
            InvalidSeedError: If every byte is zero.
        """
        error = check_entropy(data)
        if error is not None:
            raise error.to_exception()
        return cls(*_LAYOUT.unpack(data)).validate()
