"""Token -> text decoding over a vocabulary."""

from collections.abc import Iterable

from .errors import UnknownTokenError
from .types import Token
from .vocab import Vocabulary


def decode_bytes(vocab: Vocabulary, tokens: Iterable[Token]) -> bytes:
    """
    Concatenate the bytes of each token.

    :raises UnknownTokenError: If any token is not in the vocabulary,
        reporting its position in ``tokens``.
    """
    parts: list[bytes] = []
    for pos, tok in enumerate(tokens):
        try:
            parts.append(vocab.token_of(tok))
        except UnknownTokenError:
            raise UnknownTokenError(
                "failed to decode", invalid_tok=tok, position=pos
            ) from None
    return b"".join(parts)


def decode_tokens(
    vocab: Vocabulary, tokens: Iterable[Token], errors: str = "replace"
) -> str:
    """
    Decode a sequence of tokens back into text.

    :param errors: How to handle invalid UTF-8: "strict" or "replace".
    :raises UnknownTokenError: If any token is not in the vocabulary.
    """
    # token stream -> byte stream -> python string
    return decode_bytes(vocab, tokens).decode("utf-8", errors=errors)
