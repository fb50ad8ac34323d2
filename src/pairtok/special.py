"""Special token matching for encoding."""

from collections.abc import Iterator

from .errors import SpecialTokenConflictError
from .types import Token

# key under which a trie node stores the token of a literal ending there
_END = ""


class SpecialTokenTrie:
    """
    Character trie over registered special token literals.

    Matching is literal and leftmost-longest: text is scanned left to right,
    the first position where any literal starts wins, and among literals
    starting there the longest one is taken.
    """

    def __init__(self, special_toks: dict[str, Token] | None = None) -> None:
        self._root: dict = {}
        self._size = 0
        for seq, tok in (special_toks or {}).items():
            self.insert(seq, tok)

    def __len__(self) -> int:
        return self._size

    def insert(self, seq: str, tok: Token) -> None:
        """
        Add a special token literal.

        :raises SpecialTokenConflictError: If ``seq`` is empty or not a string.
        """
        if not isinstance(seq, str) or not seq:
            raise SpecialTokenConflictError(
                "special token must be a non-empty string", found_tokens={str(seq)}
            )
        node = self._root
        for ch in seq:
            node = node.setdefault(ch, {})
        if _END not in node:
            self._size += 1
        node[_END] = tok

    def longest_match(self, text: str, start: int) -> tuple[int, Token] | None:
        """Return ``(end, token)`` of the longest literal starting at ``start``."""
        node = self._root
        best: tuple[int, Token] | None = None
        i = start
        while i < len(text):
            node = node.get(text[i])
            if node is None:
                break
            i += 1
            if _END in node:
                best = (i, node[_END])
        return best

    def split(self, text: str) -> Iterator[tuple[str, Token | None]]:
        """
        Partition ``text`` into alternating plain and special spans.

        Yields ``(span, token)`` where ``token`` is the special token ID for a
        special span and ``None`` for plain text. Empty plain spans are skipped.
        """
        if not self._size:
            if text:
                yield text, None
            return

        plain_start = 0
        i = 0
        while i < len(text):
            match = self.longest_match(text, i)
            if match is None:
                i += 1
                continue
            end, tok = match
            if plain_start < i:
                yield text[plain_start:i], None
            yield text[i:end], tok
            i = plain_start = end

        if plain_start < len(text):
            yield text[plain_start:], None

