"""Command-line front end: train on a corpus, then encode/decode interactively."""

import argparse
import logging
from pathlib import Path

from . import config
from .errors import PairTokError
from .tokenizer import Tokenizer

log = logging.getLogger(__name__)

PROMPT = "\nEnter text to encode (or 'q' to quit): "


def load_corpus(path: str | None, dataset: str | None, num_docs: int | None) -> bytes:
    """Read the training corpus from a file, or from a Hugging Face dataset."""
    if dataset is not None:
        # optional dependency, only needed for dataset corpora
        from datasets import load_dataset

        log.info(f"loading dataset {dataset}")
        ds = load_dataset(dataset, split="train")
        lines = ds[:num_docs]["text"] if num_docs is not None else ds["text"]
        return "".join(lines).encode("utf-8")

    if path is None:
        raise PairTokError("either a corpus path or --dataset is required")
    return Path(path).read_bytes()


def _round_trip(tok: Tokenizer, text: str) -> None:
    """Print the encoding of ``text`` and its decoded form."""
    encoded = tok.encode(text)
    print("Encoded: " + " ".join(str(t) for t in encoded))
    print(f"Decoded: {tok.decode(encoded)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairtok",
        description="Train a byte-level BPE tokenizer and encode text with it.",
    )
    parser.add_argument("corpus", nargs="?", help="Path to the training corpus.")
    parser.add_argument(
        "--dataset",
        default=None,
        help="Hugging Face dataset with a 'text' column to train on instead of a file.",
    )
    parser.add_argument(
        "--num-docs",
        type=int,
        default=None,
        help="Number of dataset documents to use (default: all).",
    )
    parser.add_argument(
        "--vocab-size",
        type=int,
        default=None,
        help=f"Maximum vocabulary size (default: ${config.MAX_VOCAB_SIZE_ENV} "
        f"or {config.DEFAULT_MAX_VOCAB_SIZE}).",
    )
    parser.add_argument(
        "--special",
        action="append",
        default=None,
        help=f"Special token to register after training (repeatable, "
        f"default: {config.DEFAULT_SPECIAL_TOKEN}).",
    )
    parser.add_argument(
        "--stop-early",
        action="store_true",
        help="Stop training once no pair occurs more than once.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every learned merge."
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Encode and decode this text once instead of prompting.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        level = logging.INFO if args.verbose else config.log_level()
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )

        corpus = load_corpus(args.corpus, args.dataset, args.num_docs)
        print(f"Corpus size: {len(corpus)} bytes")
        if not corpus:
            log.error("corpus is empty")
            return 1

        vocab_size = args.vocab_size
        if vocab_size is None:
            vocab_size = config.default_max_vocab_size()
        tok = Tokenizer(vocab_size)
        events = tok.train(corpus, stop_early=args.stop_early, verbose=args.verbose)
        print(
            f"Training complete: {len(events)} merges performed. "
            f"Final vocabulary size: {tok.vocab_size()}"
        )

        for seq in args.special or [config.DEFAULT_SPECIAL_TOKEN]:
            print(f"Added special token {seq} with ID {tok.register_special(seq)}")

        if args.text is not None:
            _round_trip(tok, args.text)
            return 0

        while True:
            try:
                text = input(PROMPT)
            except EOFError:
                break
            if text == "q":
                break
            _round_trip(tok, text)

    except (PairTokError, OSError) as e:
        log.error(f"error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
