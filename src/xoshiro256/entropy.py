"""Default entropy collaborator for auto-seeding.

Generators never read the operating system themselves; they accept 32 bytes.
This module is what fetches those bytes when the caller supplies none.
"""

from __future__ import annotations

import logging
import os

from xoshiro256._config import Entropy, current_config, resolve_entropy
from xoshiro256.errors import SEED_BYTES, InsufficientEntropyError

__all__ = ['os_random_bytes']

logger = logging.getLogger(__name__)


def os_random_bytes(count: int = SEED_BYTES, source: Entropy | None = None) -> bytes:
    """Read ``count`` bytes from the operating system CSPRNG.

    Args:
        count: Number of bytes wanted.
        source: Entropy source; the configured one if None. GETRANDOM falls
            back to URANDOM where the platform lacks it.

    Returns:
        Exactly ``count`` bytes.

    Raises:
        InsufficientEntropyError: If the source returned a short read.
    """
    source = current_config().entropy if source is None else resolve_entropy(source)

    if source is Entropy.GETRANDOM:
        data = os.getrandom(count)
    else:
        data = os.urandom(count)

    if len(data) != count:
        raise InsufficientEntropyError(count, len(data))
    logger.debug('read %d bytes of entropy from %s', count, source.value)
    return data
