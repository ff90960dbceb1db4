"""xoshiro256+ transition function and jump polynomials.

Plain-int arithmetic on four 64-bit words. Every result is masked back to 64
bits, so the functions here behave exactly like the wrapping C reference.
"""

from __future__ import annotations

__all__ = [
    'JUMP',
    'LONG_JUMP',
    'MASK64',
    'Words',
    'jump_words',
    'rotl64',
    'step',
]

MASK64 = 0xFFFFFFFFFFFFFFFF

type Words = tuple[int, int, int, int]

# Advance by 2**128 calls to step().
JUMP: Words = (
    0x180EC6D33CFD0ABA,
    0xD5A61266F0C9392C,
    0xA9582618E03FC9AA,
    0x39ABDC4529B1661C,
)

# Advance by 2**192 calls to step().
LONG_JUMP: Words = (
    0x76E15D3EFEFDCBBF,
    0xC5004E441C522FB3,
    0x77710069854EE241,
    0x39109BB02ACBE635,
)


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by ``k`` bits."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def step(words: Words) -> tuple[int, Words]:
    """Produce one output word and the successor state.

    Args:
        words: Current state ``(s0, s1, s2, s3)``.

    Returns:
        ``(output, next_words)`` where ``output`` is ``s0 + s3`` modulo 2**64.

    Example:
        >>> step((1, 2, 3, 4))
        (5, (7, 0, 262146, 211106232532992))
    """
    s0, s1, s2, s3 = words
    result = (s0 + s3) & MASK64
    t = (s1 << 17) & MASK64
    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3
    s2 ^= t
    s3 = rotl64(s3, 45)
    return result, (s0, s1, s2, s3)


def jump_words(words: Words, polynomial: Words = JUMP) -> Words:
    """Return the state reached after the jump encoded by ``polynomial``.

    With :data:`JUMP` this is equivalent to 2**128 calls to :func:`step`; with
    :data:`LONG_JUMP`, 2**192 calls.
    """
    a0 = a1 = a2 = a3 = 0
    for chunk in polynomial:
        for bit in range(64):
            if chunk & (1 << bit):
                a0 ^= words[0]
                a1 ^= words[1]
                a2 ^= words[2]
                a3 ^= words[3]
            _, words = step(words)
    return a0, a1, a2, a3
