"""Generator error types: dual struct+exception for checked and raise-based code.

Each precondition failure exists twice: as a frozen ``msgspec.Struct`` that the
``check_*`` functions return (so callers can test inputs without ``try``) and as
a ``ValueError`` subclass that the generator raises.
"""

from __future__ import annotations

from collections.abc import Sequence

import msgspec

__all__ = [
    'SEED_BYTES',
    'U64_RANGE',
    'InsufficientEntropy',
    'InsufficientEntropyError',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'check_entropy',
    'check_length',
    'check_range',
    'check_seed',
    'check_words',
]

U64_RANGE = 1 << 64
SEED_BYTES = 32


# --- Seed Errors ---


class InvalidSeed(msgspec.Struct, frozen=True, gc=False):
    """Seed material cannot produce a valid state - struct variant."""

    reason: str

    def to_exception(self) -> InvalidSeedError:
        """Convert to exception for raise-based code."""
        return InvalidSeedError(self.reason)


class InvalidSeedError(ValueError):
    """Seed material cannot produce a valid state - exception variant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid seed: {reason}')

    def to_struct(self) -> InvalidSeed:
        """Convert to struct for checked code."""
        return InvalidSeed(self.reason)


class InsufficientEntropy(msgspec.Struct, frozen=True, gc=False):
    """Entropy buffer has the wrong size - struct variant."""

    expected: int
    received: int

    def to_exception(self) -> InsufficientEntropyError:
        """Convert to exception for raise-based code."""
        return InsufficientEntropyError(self.expected, self.received)


class InsufficientEntropyError(ValueError):
    """Entropy buffer has the wrong size - exception variant."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f'Expected {expected} bytes of entropy, got {received}')

    def to_struct(self) -> InsufficientEntropy:
        """Convert to struct for checked code."""
        return InsufficientEntropy(self.expected, self.received)


# --- Sampling Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Bounds do not describe a samplable range - struct variant."""

    low: int
    high: int

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.low, self.high)


class InvalidRangeError(ValueError):
    """Bounds do not describe a samplable range - exception variant."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        if low > high:
            msg = f'Invalid range [{low}, {high}]: low is greater than high'
        else:
            msg = f'Invalid range [{low}, {high}]: more than 2**64 values'
        super().__init__(msg)

    def to_struct(self) -> InvalidRange:
        """Convert to struct for checked code."""
        return InvalidRange(self.low, self.high)


class InvalidLength(msgspec.Struct, frozen=True, gc=False):
    """Requested byte count is not positive - struct variant."""

    length: int

    def to_exception(self) -> InvalidLengthError:
        """Convert to exception for raise-based code."""
        return InvalidLengthError(self.length)


class InvalidLengthError(ValueError):
    """Requested byte count is not positive - exception variant."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f'Positive length required, got {length}')

    def to_struct(self) -> InvalidLength:
        """Convert to struct for checked code."""
        return InvalidLength(self.length)


# --- Precondition checks ---


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful seed or bound
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f'{name} must be an int, not {type(value).__name__}'
        raise TypeError(msg)


def check_seed(seed: int) -> InvalidSeed | None:
    """Check that a single seed fits in an unsigned 64-bit word.

    Raises:
        TypeError: If ``seed`` is not an int.
    """
    _require_int('seed', seed)
    if not 0 <= seed < U64_RANGE:
        return InvalidSeed(f'seed {seed} is outside [0, 2**64)')
    return None


def check_words(words: Sequence[int]) -> InvalidSeed | None:
    """Check four state words: count, 64-bit range and the non-zero invariant.

    Example:
        >>> check_words((1, 2, 3, 4)) is None
        True
        >>> check_words((0, 0, 0, 0))
        InvalidSeed(reason='all four state words are zero')
    """
    if len(words) != 4:
        return InvalidSeed(f'expected 4 state words, got {len(words)}')
    for index, word in enumerate(words):
        _require_int(f'word {index}', word)
        if not 0 <= word < U64_RANGE:
            return InvalidSeed(f'word {index} ({word}) is outside [0, 2**64)')
    if not any(words):
        return InvalidSeed('all four state words are zero')
    return None


def check_entropy(data: bytes) -> InsufficientEntropy | None:
    """Check that an entropy buffer holds exactly one state's worth of bytes."""
    if len(data) != SEED_BYTES:
        return InsufficientEntropy(SEED_BYTES, len(data))
    return None


def check_range(low: int, high: int) -> InvalidRange | None:
    """Check inclusive bounds for bounded sampling.

    Raises:
        TypeError: If either bound is not an int.
    """
    _require_int('low', low)
    _require_int('high', high)
    if low > high or high - low + 1 > U64_RANGE:
        return InvalidRange(low, high)
    return None


def check_length(length: int) -> InvalidLength | None:
    """Check a requested byte count."""
    _require_int('length', length)
    if length <= 0:
        return InvalidLength(length)
    return None
