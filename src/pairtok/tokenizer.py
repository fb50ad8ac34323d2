"""
Byte-level BPE tokenizer facade.
"""

import logging

from ._decorators import measure_time
from .config import check_vocab_size
from .decoder import decode_bytes, decode_tokens
from .encoder import encode_text
from .trainer import BPETrainer, BPETrainingResult, MergeEvent, MergeSink
from .types import Token
from .vocab import Vocabulary

log = logging.getLogger(__name__)


class Tokenizer:
    """
    Byte-level BPE tokenizer owning a single :class:`Vocabulary`.

    Instances share no state, so several tokenizers can live side by side.
    Training, encoding and decoding all run synchronously and a tokenizer
    must not be used from several threads while it trains.
    """

    def __init__(self, max_vocab_size: int) -> None:
        """
        Initialize tokenizer with base 256 vocabulary.

        :param max_vocab_size: Upper bound for the vocabulary reached by training.
        :raises ConfigError: If ``max_vocab_size`` is less than or equal to 256.
        """
        self.max_vocab_size = check_vocab_size(max_vocab_size)
        self.vocab = Vocabulary()
        self.last_result: BPETrainingResult | None = None

    @measure_time("training")
    def train(
        self,
        text: bytes | bytearray | str | list[str],
        stop_early: bool = False,
        *,
        vocab_size: int | None = None,
        verbose: bool = False,
        on_merge: MergeSink | None = None,
    ) -> list[MergeEvent]:
        """
        Train the tokenizer on raw text using byte-level BPE.

        List inputs are concatenated and strings are encoded as UTF-8. Calling
        ``train`` again continues from the merges already learned.

        :param text: Training corpus as bytes, a single string or a list of strings.
        :param stop_early: Stop once the most frequent pair occurs only once.
        :param vocab_size: Target size for this call (default: ``max_vocab_size``).
            A target above ``max_vocab_size`` raises ``max_vocab_size`` to match.
        :param verbose: Log each learned merge when ``True``.
        :param on_merge: Optional callable receiving each :class:`MergeEvent`.
        :returns: The merge events accepted during this call, in order.
        :raises ConfigError: If ``vocab_size`` is less than or equal to 256.
        """
        if vocab_size is not None:
            # a larger target raises the cap so vocab_size() never exceeds it
            self.max_vocab_size = max(self.max_vocab_size, check_vocab_size(vocab_size))
        target = self.max_vocab_size if vocab_size is None else vocab_size

        # handle list input and convert text to bytes
        if isinstance(text, list):
            text = "".join(text)
        if isinstance(text, str):
            data = text.encode("utf-8")
        elif isinstance(text, (bytes, bytearray)):
            data = bytes(text)
        else:
            raise TypeError(f"unsupported corpus type: {type(text).__name__}")

        trainer = BPETrainer(self.vocab, on_merge=on_merge)
        self.last_result = trainer.train(
            data, target, stop_early=stop_early, verbose=verbose
        )
        return self.last_result.events

    def encode(self, text: str) -> list[Token]:
        """Encode text into a sequence of tokens, keeping special tokens atomic."""
        return encode_text(self.vocab, text)

    def decode(self, tokens: list[Token], errors: str = "replace") -> str:
        """
        Decode a sequence of tokens back into text.

        :param errors: How to handle invalid UTF-8: "strict" or "replace" (default: "replace").
        :raises UnknownTokenError: If any token ID is not in the vocabulary.
        """
        return decode_tokens(self.vocab, tokens, errors=errors)

    def decode_bytes(self, tokens: list[Token]) -> bytes:
        """Decode a sequence of tokens into raw bytes."""
        return decode_bytes(self.vocab, tokens)

    def register_special(self, seq: str) -> Token:
        """
        Register a special token literal and return its ID.

        Registration is idempotent: a known literal keeps its ID.

        :raises SpecialTokenConflictError: If ``seq`` is empty or not a string.
        """
        before = self.vocab.size()
        tok = self.vocab.register_special(seq)
        if self.vocab.size() > before:
            log.info(f"added special token {seq!r} with id {tok}")
        return tok

    @property
    def special_tokens(self) -> dict[str, Token]:
        """Registered special tokens as a literal -> ID mapping."""
        return dict(self.vocab.special_toks)

    @property
    def n_merges(self) -> int:
        """Number of merge rules learned so far."""
        return len(self.vocab.merges)

    def vocab_size(self) -> int:
        """Return the number of tokens in the vocabulary, special tokens included."""
        return self.vocab.size()

    def reset(self) -> None:
        """Forget all merges and special tokens."""
        self.vocab.reset()
        self.last_result = None
