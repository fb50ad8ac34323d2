"""Standalone BPE training module."""

from dataclasses import dataclass, field
import logging
from typing import Callable

from ._bpe import bpe_merge, most_frequent_pair, replay_merges
from ._sanitise import render_bytes
from .config import check_vocab_size
from .types import Token, TokenBytes, TokenPair
from .vocab import Vocabulary

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeEvent:
    """One accepted merge, as reported to a training event sink."""

    pair: TokenPair
    new_tok: Token
    new_bytes: TokenBytes


type MergeSink = Callable[[MergeEvent], object]


@dataclass
class BPETrainingResult:
    """Results from one BPE training run."""

    n_merges: int
    vocab_size: int
    events: list[MergeEvent] = field(default_factory=list)


class BPETrainer:
    """
    BPE trainer that learns merge rules into a :class:`Vocabulary`.

    Each round counts adjacent pairs, picks the most frequent one (smallest
    pair wins a tie), mints the next token ID for it and rewrites the
    sequence. Training may be called again on the same vocabulary: the
    existing rules are replayed over the new corpus first and the loop
    continues from the current ID counter.

    Example:
       >>> vocab = Vocabulary()
       >>> result = BPETrainer(vocab).train(b"aaaa", vocab_size=257)
       >>> (result.n_merges, result.vocab_size)
       (1, 257)
    """

    def __init__(self, vocab: Vocabulary, on_merge: MergeSink | None = None) -> None:
        self.vocab = vocab
        self.on_merge = on_merge

    def train(
        self,
        data: bytes | list[Token],
        vocab_size: int,
        stop_early: bool = False,
        verbose: bool = False,
    ) -> BPETrainingResult:
        """
        Learn merges until the vocabulary reaches ``vocab_size``.

        :param data: Raw corpus bytes, or a sequence of byte tokens.
        :param vocab_size: Target vocabulary size including the base 256 bytes.
        :param stop_early: Stop instead of merging a pair that occurs only once.
        :param verbose: Log each learned merge when ``True``.
        :returns: Merge count, final vocabulary size and the merge events.
        :raises ConfigError: If ``vocab_size`` is less than or equal to 256.
        """
        check_vocab_size(vocab_size)

        tokens = replay_merges(list(data), self.vocab.merges)
        n_requested = max(vocab_size - self.vocab.size(), 0)
        events: list[MergeEvent] = []
        stopped_on_singleton = False

        while self.vocab.size() < vocab_size:
            best = most_frequent_pair(tokens)
            # fewer than two tokens left
            if best is None:
                break

            pair, count = best
            if stop_early and count == 1:
                stopped_on_singleton = True
                break

            rule = self.vocab.add_merge(pair)
            tokens = bpe_merge(tokens, pair, rule.tok)

            event = MergeEvent(pair, rule.tok, self.vocab.token_of(rule.tok))
            events.append(event)
            if self.on_merge is not None:
                self.on_merge(event)

            if verbose:
                log.info(
                    "merge %d/%d: %s -> %d (%s)",
                    len(events),
                    n_requested,
                    pair,
                    rule.tok,
                    render_bytes(event.new_bytes),
                )

        if stopped_on_singleton:
            log.warning(
                f"most frequent pair occurs once after {len(events)} merges "
                f"(requested {n_requested}) stopping early"
            )
        elif len(events) < n_requested:
            log.warning(
                f"no more byte pairs to merge after {len(events)} merges "
                f"(requested {n_requested}) stopping early"
            )

        log.info(
            f"training complete: {len(events)} merges performed, "
            f"final vocabulary size {self.vocab.size()}"
        )

        return BPETrainingResult(
            n_merges=len(events),
            vocab_size=self.vocab.size(),
            events=events,
        )
