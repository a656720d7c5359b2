"""String reversal, length-first sorting and delimiter tokenising."""

from __future__ import annotations

import re
from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Sort longest first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))


def tokenize(text: str, delimiters: str = " ") -> list[str]:
    """Split ``text`` at any of the ``delimiters`` characters, dropping empty tokens."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(ch) for ch in delimiters) + "]+"
    return [token for token in re.split(pattern, text) if token]