"""Package configuration: Entropy enum, XoshiroConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from xoshiro256._logging import configure_logging

__all__ = [
    'Entropy',
    'XoshiroConfig',
    'current_config',
    'get_config',
    'init',
    'resolve_entropy',
]

ENTROPY_ENV_VAR = 'XOSHIRO_ENTROPY'


class Entropy(Enum):
    """Operating-system source used to auto-seed generators."""

    URANDOM = 'urandom'
    GETRANDOM = 'getrandom'


@dataclass(frozen=True)
class XoshiroConfig:
    """Configuration for xoshiro256.

    Attributes:
        entropy: Source of the 32 bytes read by auto-seeding.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render log entries as JSON rather than console text.
    """

    entropy: Entropy = Entropy.URANDOM
    log_level: str | None = None
    json_logs: bool = True


# Set by init()
_config: XoshiroConfig | None = None


def resolve_entropy(entropy: Entropy | str) -> Entropy:
    """Turn an explicit entropy choice into a source usable on this platform.

    GETRANDOM falls back to URANDOM, with a warning, where ``os.getrandom``
    does not exist.

    Raises:
        ValueError: If ``entropy`` is a string naming no known source.
    """
    if isinstance(entropy, str):
        entropy = Entropy(entropy.lower())
    if entropy is Entropy.GETRANDOM and not hasattr(os, 'getrandom'):
        logging.warning('os.getrandom is unavailable on this platform, defaulting to urandom')
        return Entropy.URANDOM
    return entropy


def _detect_entropy() -> Entropy:
    """Detect the entropy source from the environment.

    Priority:
    1. XOSHIRO_ENTROPY environment variable ("urandom" or "getrandom")
    2. Default to URANDOM
    """
    env_entropy = os.environ.get(ENTROPY_ENV_VAR, '').lower()
    if not env_entropy:
        return Entropy.URANDOM
    try:
        return resolve_entropy(env_entropy)
    except ValueError:
        logging.warning("Unknown %s value '%s', defaulting to urandom", ENTROPY_ENV_VAR, env_entropy)
        return Entropy.URANDOM


def init(
    entropy: Entropy | str | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> XoshiroConfig:
    """Initialize xoshiro256 with the specified configuration.

    Args:
        entropy: Auto-seeding source. Detected from the environment if None.
            Can be Entropy enum or string ("urandom", "getrandom").
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs when ``log_level`` is given.

    Returns:
        The XoshiroConfig that was set.

    Example:
        ```python
        from xoshiro256 import Entropy, init

        init()
        init(entropy=Entropy.GETRANDOM, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_entropy = _detect_entropy() if entropy is None else resolve_entropy(entropy)

    _config = XoshiroConfig(
        entropy=resolved_entropy,
        log_level=log_level,
        json_logs=json_logs,
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_logs)

    return _config


def get_config() -> XoshiroConfig:
    """Get the configuration set by :func:`init`.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'xoshiro256 not initialized. Call xoshiro256.init() first.'
        raise RuntimeError(msg)
    return _config


def current_config() -> XoshiroConfig:
    """The initialized configuration, or environment-detected defaults."""
    if _config is None:
        return XoshiroConfig(entropy=_detect_entropy())
    return _config
