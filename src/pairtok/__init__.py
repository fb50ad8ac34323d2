"""PairTok: byte-pair encoding tokenizer."""

from .errors import (
    ConfigError,
    PairTokError,
    SpecialTokenConflictError,
    UnknownTokenError,
)
from .tokenizer import Tokenizer
from .trainer import BPETrainer, BPETrainingResult, MergeEvent
from .vocab import MergeRule, Vocabulary
from .encoder import encode_text
from .decoder import decode_bytes, decode_tokens

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pairtok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Tokenizer",
    "Vocabulary",
    "MergeRule",
    "BPETrainer",
    "BPETrainingResult",
    "MergeEvent",
    "encode_text",
    "decode_tokens",
    "decode_bytes",
    "PairTokError",
    "ConfigError",
    "UnknownTokenError",
    "SpecialTokenConflictError",
]
