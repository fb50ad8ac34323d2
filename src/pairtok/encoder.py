"""Text -> token encoding over a trained vocabulary."""

import logging

from ._bpe import apply_merges
from .types import Token
from .vocab import Vocabulary

log = logging.getLogger(__name__)


def encode_ordinary(vocab: Vocabulary, text: str) -> list[Token]:
    """
    Encode text as bytes and apply known merges until a fixpoint.

    Special token literals get no special treatment here.
    """
    # encode Unicode text into bytes, each byte in [0-255] token range
    tokens = list(text.encode("utf-8"))
    return apply_merges(tokens, vocab.merges)


def encode_text(vocab: Vocabulary, text: str) -> list[Token]:
    """
    Encode text into a sequence of tokens.

    Registered special token literals are matched leftmost-longest and map
    straight to their ID. Every span between them is BPE-encoded on its own,
    so merges never cross a special token boundary.

    :param vocab: Vocabulary to read merges and special tokens from.
    :param text: Text to encode.
    :returns: Encoded token sequence.
    """
    if not vocab.special_toks:
        return encode_ordinary(vocab, text)

    tokens: list[Token] = []
    n_spans = 0
    for span, special_tok in vocab.trie.split(text):
        n_spans += 1
        if special_tok is not None:
            tokens.append(special_tok)
        else:
            tokens.extend(encode_ordinary(vocab, span))

    log.debug(f"encoded {n_spans} spans into {len(tokens)} tokens")
    return tokens
