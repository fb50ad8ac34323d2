"""
Printable rendering of token bytes for logs and the CLI.
"""

import unicodedata


def _printable(c: str) -> str:
    # control, format and unassigned categories all start with "C"
    if unicodedata.category(c).startswith("C"):
        return c.encode("unicode_escape").decode("ascii")
    return c


def render_bytes(b: bytes) -> str:
    """
    Decode token bytes as UTF-8 and escape control characters.

    A merge token may hold only part of a multi-byte character; those bytes
    show up as the Unicode replacement character.
    """
    return "".join(_printable(c) for c in b.decode("utf-8", errors="replace"))
