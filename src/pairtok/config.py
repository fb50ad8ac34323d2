"""Package-wide constants and environment-driven settings."""

import logging
import os
from typing import Final

from .errors import ConfigError

# one reserved token per raw byte value
BASE_VOCAB_SIZE: Final[int] = 256
DEFAULT_MAX_VOCAB_SIZE: Final[int] = 1000
DEFAULT_SPECIAL_TOKEN: Final[str] = "<|endoftext|>"

MAX_VOCAB_SIZE_ENV: Final[str] = "PAIRTOK_MAX_VOCAB_SIZE"
LOG_LEVEL_ENV: Final[str] = "PAIRTOK_LOG_LEVEL"


def check_vocab_size(vocab_size: int) -> int:
    """
    Validate a target vocabulary size.

    :raises ConfigError: If ``vocab_size`` does not leave room for at least one merge.
    """
    if vocab_size <= BASE_VOCAB_SIZE:
        raise ConfigError(
            f"vocab size must be greater than {BASE_VOCAB_SIZE}", vocab_size=vocab_size
        )
    return vocab_size


def default_max_vocab_size() -> int:
    """Return the default max vocab size (respects env var override)."""
    raw = os.environ.get(MAX_VOCAB_SIZE_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_VOCAB_SIZE
    try:
        vocab_size = int(raw)
    except ValueError:
        raise ConfigError(f"{MAX_VOCAB_SIZE_ENV} is not an integer: {raw!r}")
    return check_vocab_size(vocab_size)


def log_level() -> int:
    """Return the CLI log level (respects env var override)."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ConfigError(f"{LOG_LEVEL_ENV} is not a log level: {raw!r}")
    return level
