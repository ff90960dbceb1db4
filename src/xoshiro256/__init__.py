"""xoshiro256: xoshiro256+ pseudo-random number generator.

Fast, reproducible, non-cryptographic PRNG with unbiased integer ranges,
byte streams, floats, shuffling and sampling. Every generator is an explicit,
caller-owned object; there is no hidden module-level instance.

Flat imports (preferred):
    from xoshiro256 import Xoshiro256, GeneratorState
    from xoshiro256 import InvalidRangeError, InvalidSeedError

Submodule imports (for organization):
    from xoshiro256.seeding import expand_seed, splitmix64
    from xoshiro256.codec import encode_state, decode_state
    from xoshiro256._core import step, jump_words
"""

from xoshiro256._config import Entropy, XoshiroConfig, get_config, init
from xoshiro256._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
    reset_logging,
)
from xoshiro256.codec import decode_state, decode_state_json, encode_state, encode_state_json
from xoshiro256.entropy import os_random_bytes
from xoshiro256.errors import (
    InsufficientEntropy,
    InsufficientEntropyError,
    InvalidLength,
    InvalidLengthError,
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    check_entropy,
    check_length,
    check_range,
    check_seed,
    check_words,
)
from xoshiro256.generator import Xoshiro256
from xoshiro256.seeding import expand_seed, splitmix64
from xoshiro256.state import GeneratorState

__all__ = [
    # Config
    'Entropy',
    # State
    'GeneratorState',
    # Errors - struct variants
    'InsufficientEntropy',
    # Errors - exception variants
    'InsufficientEntropyError',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    # Generator
    'Xoshiro256',
    'XoshiroConfig',
    # Logging
    'add_log_hook',
    # Precondition checks
    'check_entropy',
    'check_length',
    'check_range',
    'check_seed',
    'check_words',
    'clear_log_hooks',
    'configure_logging',
    # Codec
    'decode_state',
    'decode_state_json',
    'encode_state',
    'encode_state_json',
    # Seeding
    'expand_seed',
    'get_config',
    'get_logger',
    'init',
    # Entropy
    'os_random_bytes',
    'remove_log_hook',
    'reset_logging',
    'splitmix64',
]
