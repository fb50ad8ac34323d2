"""
Vocabulary store shared by the trainer, encoder and decoder.
"""

from dataclasses import dataclass
import logging

from .config import BASE_VOCAB_SIZE
from .errors import PairTokError, SpecialTokenConflictError, UnknownTokenError
from .special import SpecialTokenTrie
from .types import Encoding, Token, TokenBytes, TokenPair, VocabTable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeRule:
    """A learned ``pair -> token`` substitution."""

    pair: TokenPair
    tok: Token


class Vocabulary:
    """
    Append-only table of token IDs.

    IDs 0-255 are the raw bytes. Every ID from 256 upwards comes from one
    counter shared by merge tokens and special tokens, so whichever is
    registered first takes the next ID. Nothing is ever removed except by a
    full :meth:`reset`.
    """

    def __init__(self) -> None:
        """Initialize with the base 256 byte tokens."""
        # byte pair -> merge token, in creation order
        self.merges: Encoding
        # tokens -> bytes for base and merge tokens
        self.vocab: VocabTable
        self.special_toks: dict[str, Token]
        self.inverted_special_toks: dict[Token, str]
        self._trie: SpecialTokenTrie
        self._next_tok: Token
        self.reset()

    def reset(self) -> None:
        """Drop all merges and special tokens and return to the 256 byte tokens."""
        self.merges = {}
        self.vocab = {btok: bytes([btok]) for btok in range(BASE_VOCAB_SIZE)}
        self.special_toks = {}
        self.inverted_special_toks = {}
        self._trie = SpecialTokenTrie()
        self._next_tok = BASE_VOCAB_SIZE
        log.debug("vocabulary reset to base byte tokens")

    def size(self) -> int:
        """Return the next unused token ID, i.e. the number of tokens defined so far."""
        return self._next_tok

    def __len__(self) -> int:
        return self._next_tok

    def __contains__(self, tok: object) -> bool:
        return tok in self.vocab or tok in self.inverted_special_toks

    def token_of(self, tok: Token) -> TokenBytes:
        """
        Return the bytes a token stands for.

        Special tokens map to the UTF-8 encoding of their literal.

        :raises UnknownTokenError: If ``tok`` is not a byte, merge or special token.
        """
        # special table first; IDs never collide across tables
        seq = self.inverted_special_toks.get(tok)
        if seq is not None:
            return seq.encode("utf-8")
        try:
            return self.vocab[tok]
        except KeyError:
            raise UnknownTokenError("token not in vocabulary", invalid_tok=tok) from None

    def id_of_pair(self, pair: TokenPair) -> Token | None:
        """Return the merge token for ``pair``, or ``None`` if it was never learned."""
        return self.merges.get(pair)

    def add_merge(self, pair: TokenPair) -> MergeRule:
        """
        Mint the next token ID for ``pair`` and record its bytes.

        :raises PairTokError: If ``pair`` is already a merge rule.
        :raises UnknownTokenError: If either half of ``pair`` is unknown.
        """
        if pair in self.merges:
            raise PairTokError(f"merge rule for {pair} already exists")
        tok0, tok1 = pair
        new_bytes = self.token_of(tok0) + self.token_of(tok1)
        mtok = self._next_tok
        self.merges[pair] = mtok
        self.vocab[mtok] = new_bytes
        self._next_tok += 1
        return MergeRule(pair, mtok)

    def register_special(self, seq: str) -> Token:
        """
        Register a special token literal and return its ID.

        Registering a literal that already exists returns the existing ID and
        does not consume a new one.

        :raises SpecialTokenConflictError: If ``seq`` is empty or not a string.
        """
        if not isinstance(seq, str) or not seq:
            raise SpecialTokenConflictError(
                "special token must be a non-empty string", found_tokens={str(seq)}
            )

        tok = self.special_toks.get(seq)
        if tok is not None:
            return tok

        tok = self._next_tok
        self._trie.insert(seq, tok)
        self.special_toks[seq] = tok
        self.inverted_special_toks[tok] = seq
        self._next_tok += 1
        log.debug(f"added special token {seq!r} with id {tok}")
        return tok

    @property
    def trie(self) -> SpecialTokenTrie:
        """Matcher over the registered special tokens."""
        return self._trie

    def merge_rules(self) -> list[MergeRule]:
        """Return all merge rules in creation order."""
        return [MergeRule(pair, mtok) for pair, mtok in self.merges.items()]
