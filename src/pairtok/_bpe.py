"""
Core Byte Pair Encoding (BPE) operations.

Pure functions over token sequences. Nothing here touches a vocabulary, so
the trainer and the encoder share the same merge semantics.
"""

from collections import Counter

from .types import Encoding, Token, TokenPair


def bpe_freqs(tokens: list[Token]) -> Counter[TokenPair]:
    """
    Count every adjacent token pair in the sequence.

    Windows overlap, so ``[a, a, a]`` counts ``(a, a)`` twice.

    :param tokens: Token sequence to analyze.
    :returns: Mapping of token pairs to their occurrence counts.
    """
    return Counter(zip(tokens, tokens[1:]))


def most_frequent_pair(tokens: list[Token]) -> tuple[TokenPair, int] | None:
    """
    Return the most frequent adjacent pair and its count.

    Ties are broken by the lexicographically smallest ``(first, second)`` pair
    so that training is reproducible.

    :param tokens: Token sequence to analyze.
    :returns: ``(pair, count)``, or ``None`` when the sequence has fewer than two tokens.
    """
    counts = bpe_freqs(tokens)
    if not counts:
        return None
    pair = min(counts, key=lambda p: (-counts[p], p))
    return pair, counts[pair]


def bpe_merge(tokens: list[Token], target: TokenPair, new_tok: Token) -> list[Token]:
    """
    Merge all occurrences of a target token pair into a single new token.

    Replacement is non-overlapping and runs left to right, so a run of three
    identical tokens becomes one merged token followed by the leftover token.

    Note that merged tokens may hold partial UTF-8 sequences. Decode with
    ``errors="replace"`` when rendering them on their own.

    :param tokens: Original list of tokens.
    :param target: The consecutive pair of tokens to merge.
    :param new_tok: The new token that replaces the target pair.
    :returns: New token list with all target pairs replaced by ``new_tok``.
    """
    newtoks: list[Token] = []

    i = 0
    n = len(tokens)
    while i < n:
        # check if we can form a pair and it matches the target
        if i < n - 1 and tokens[i] == target[0] and tokens[i + 1] == target[1]:
            newtoks.append(new_tok)
            i += 2
        else:
            newtoks.append(tokens[i])
            i += 1

    return newtoks


def merge_pass(tokens: list[Token], merges: Encoding) -> tuple[list[Token], bool]:
    """
    Apply every known merge once in a single left-to-right pass.

    Whichever known pair is found first in scan order is merged, regardless of
    when it was learned. A freshly merged token is not re-paired with its right
    neighbour until the next pass.

    :param tokens: Token sequence to rewrite.
    :param merges: Known pair -> merged token table.
    :returns: The rewritten sequence and whether any substitution happened.
    """
    newtoks: list[Token] = []
    changed = False

    i = 0
    n = len(tokens)
    while i < n:
        if i < n - 1:
            mtok = merges.get((tokens[i], tokens[i + 1]))
            if mtok is not None:
                newtoks.append(mtok)
                changed = True
                i += 2
                continue
        newtoks.append(tokens[i])
        i += 1

    return newtoks, changed


def apply_merges(tokens: list[Token], merges: Encoding) -> list[Token]:
    """Repeat :func:`merge_pass` until a full pass changes nothing."""
    if not merges:
        return list(tokens)

    changed = True
    while changed:
        tokens, changed = merge_pass(tokens, merges)
    return tokens


def replay_merges(tokens: list[Token], merges: Encoding) -> list[Token]:
    """
    Reapply merges one rule at a time in creation order.

    This reproduces the sequence a trainer would hold after learning
    ``merges`` on the same tokens, which lets training resume on a new call.
    """
    for pair, mtok in merges.items():
        tokens = bpe_merge(tokens, pair, mtok)
    return tokens
