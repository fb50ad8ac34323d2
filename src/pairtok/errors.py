"""Custom exception hierarchy for pairtok errors."""

from .types import Token


class PairTokError(Exception):
    """Base exception for all pairtok errors."""


class ConfigError(PairTokError):
    """Raised when a tokenizer or setting is configured with an invalid value."""

    def __init__(self, message: str, *, vocab_size: int | None = None) -> None:
        """Initialize with an optional vocab_size that gets appended to the message."""
        extra = ""
        if vocab_size is not None:
            extra += f" (vocab size: {vocab_size})"
        super().__init__(message + extra)
        self.vocab_size = vocab_size


class UnknownTokenError(PairTokError):
    """Raised when a token ID is absent from both the merge and special tables."""

    def __init__(
        self,
        message: str,
        *,
        invalid_tok: Token | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize with the offending token and its position in the input, if known."""
        extra = ""
        if invalid_tok is not None:
            extra += f" (invalid token: {invalid_tok})"
        if position is not None:
            extra += f" (position: {position})"
        super().__init__(message + extra)
        self.invalid_tok = invalid_tok
        self.position = position


class SpecialTokenConflictError(PairTokError):
    """Raised when a special token literal would make span splitting ambiguous."""

    def __init__(self, message: str, *, found_tokens: set[str] | None = None) -> None:
        """Initialize with optional found_tokens that get appended to the message."""
        if found_tokens:
            message = f"{message} (found: {', '.join(repr(t) for t in sorted(found_tokens))})"
        super().__init__(message)
        self.found_tokens = found_tokens
