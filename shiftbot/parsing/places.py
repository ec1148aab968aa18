"""Place phrase extraction.

Works line by line: users typically put the location on its own line, and
a line is the unit that decides whether leftover words are a place or a
person.
"""

from __future__ import annotations

import re

from shiftbot.parsing.names import looks_like_name
from shiftbot.parsing.patterns import DATE_PATTERNS, TIME_PATTERNS, blank_matches
from shiftbot.stopwords.index import StopWordIndex

_EDGE_PUNCTUATION = " ,.;:!?()[]{}-\"'«»"
_HAS_WORD_CHAR = re.compile(r"[^\W_]")


def _strip_name(text: str, name: str) -> str:
    """Remove the detected name, including parts of it split onto other lines."""
    without_full = text.replace(name, " ")
    name_parts = set(name.split())
    return " ".join(word for word in without_full.split() if word.strip(_EDGE_PUNCTUATION) not in name_parts)


def clean_line(line: str, name: str | None = None) -> str:
    """Blank out dates, times and the detected name from one line.

    Args:
        line: One normalized line
        name: Detected user name, if any

    Returns:
        Leftover text, trimmed of edge punctuation (may be empty)
    """
    cleaned = line
    for pattern in (*DATE_PATTERNS, *TIME_PATTERNS):
        cleaned = blank_matches(cleaned, pattern)

    if name:
        cleaned = _strip_name(cleaned, name)

    cleaned = " ".join(cleaned.split()).strip(_EDGE_PUNCTUATION)
    if not _HAS_WORD_CHAR.search(cleaned):
        return ""
    return cleaned


def extract_place(lines: list[str], index: StopWordIndex, name: str | None = None) -> str | None:
    """Collect place material from message lines.

    A cleaned line is kept when it contains a location token, or when it
    does not look exactly like a personal name.

    Args:
        lines: Normalized, non-blank message lines
        index: Stop-word index
        name: Detected user name to exclude

    Returns:
        Place phrase joined with single spaces, or None
    """
    place_parts: list[str] = []
    for line in lines:
        cleaned = clean_line(line, name)
        if not cleaned:
            continue

        if index.contains_any_location_token(cleaned) or not looks_like_name(cleaned):
            place_parts.append(cleaned)

    if not place_parts:
        return None
    return " ".join(" ".join(place_parts).split())


def guess_place(lines: list[str], index: StopWordIndex) -> str | None:
    """Provisional place guess made before the name is known.

    Only words that are location tokens take part, so an unknown name sitting
    on the same line as the place cannot collide with itself.

    Args:
        lines: Normalized, non-blank message lines
        index: Stop-word index

    Returns:
        Location words joined with single spaces, or None
    """
    words: list[str] = []
    for line in lines:
        cleaned = clean_line(line)
        words.extend(word.strip(_EDGE_PUNCTUATION) for word in index.location_tokens(cleaned))

    words = [word for word in words if word]
    return " ".join(words) if words else None
