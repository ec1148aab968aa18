"""Text normalization for raw chat messages.

Messages arrive with decorative emoji, typographic dashes, non-breaking
spaces and ragged whitespace. Everything downstream works on the output of
`normalize_message`, which keeps line breaks (place extraction is line based)
but collapses all other whitespace noise.
"""

from __future__ import annotations

import re
import unicodedata

# Typographic variants folded to ASCII before anything else
_CHAR_REPLACEMENTS = str.maketrans({
    "\u2010": "-",  # hyphen
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    "\u2015": "-",  # horizontal bar
    "\u2212": "-",  # minus sign
    "\u2026": " ",  # ellipsis
    "\u00a0": " ",  # no-break space
})

# Symbol categories: other, modifier, currency, math
_SYMBOL_CATEGORIES = frozenset({"So", "Sk", "Sc", "Sm"})

# Invisible emoji glue left behind once the pictographs are gone
_EMOJI_JOINERS = frozenset({"\u200d", "\ufe0e", "\ufe0f"})

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_NEWLINE_WITH_PADDING = re.compile(r"\s*\n\s*")
_NON_WORD_RUN = re.compile(r"[\W_]+")


def _strip_symbols(text: str) -> str:
    return "".join(
        " " if ch in _EMOJI_JOINERS or unicodedata.category(ch) in _SYMBOL_CATEGORIES else ch
        for ch in text
    )


def normalize_message(text: str | None) -> str:
    """Canonicalize a raw chat message.

    Args:
        text: Raw message text (may be None)

    Returns:
        Normalized text with line breaks preserved, possibly empty
    """
    if not text:
        return ""

    cleaned = text.translate(_CHAR_REPLACEMENTS)
    cleaned = _strip_symbols(cleaned)

    # Line breaks separate place and name lines, every other whitespace run collapses
    cleaned = _HORIZONTAL_WHITESPACE.sub(" ", cleaned)
    cleaned = _NEWLINE_WITH_PADDING.sub("\n", cleaned)

    return cleaned.strip()


def split_lines(text: str) -> list[str]:
    """Split normalized text into trimmed, non-blank lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def normalize_phrase(text: str | None) -> str:
    """Lowercase and reduce every non letter/digit run to a single space."""
    if not text:
        return ""
    return _NON_WORD_RUN.sub(" ", text.lower()).strip()


def normalize_token(text: str | None) -> str:
    """Lowercase and drop every non letter/digit character."""
    if not text:
        return ""
    return _NON_WORD_RUN.sub("", text.lower())
