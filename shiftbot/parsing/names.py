"""Personal name extraction.

A name is a run of two or three capitalized words ("Дима Маслов",
"Петренко Іван Олегович"). Users split names across lines, glue them to
place names and put them anywhere in the message, so candidates are built
from runs of capitalized words and filtered against the stop-word index and
the place phrase.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from shiftbot.parsing.patterns import DIGIT, NAME_WORD
from shiftbot.stopwords.index import StopWordIndex
from shiftbot.text.normalize import normalize_token

MIN_NAME_WORDS = 2
MAX_NAME_WORDS = 3
MIN_WORD_LENGTH = 2


@dataclass(frozen=True)
class _Word:
    text: str
    start: int


def _is_name_word(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH and word[0].isupper()


def _touches_digit(text: str, start: int, end: int) -> bool:
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    return before.isdigit() or after.isdigit()


def _capitalized_runs(text: str) -> list[list[_Word]]:
    """Group capitalized words separated only by whitespace (line breaks included)."""
    runs: list[list[_Word]] = []
    current: list[_Word] = []
    previous_end: int | None = None

    for match in NAME_WORD.finditer(text):
        word = match.group(0)
        gap = text[previous_end:match.start()] if previous_end is not None else ""
        previous_end = match.end()

        eligible = _is_name_word(word) and not _touches_digit(text, match.start(), match.end())
        if not eligible or (current and not gap.isspace()):
            if current:
                runs.append(current)
            current = []
        if eligible:
            current.append(_Word(text=word, start=match.start()))

    if current:
        runs.append(current)
    return runs


def _inside_place(candidate: str, place_text: str | None) -> bool:
    """Check whether a name candidate overlaps the place phrase."""
    if not candidate or not place_text:
        return False

    normalized_candidate = candidate.lower().strip()
    normalized_place = place_text.lower().strip()
    if not normalized_place:
        return False

    if normalized_candidate in normalized_place or normalized_place in normalized_candidate:
        return True

    candidate_tokens = {normalize_token(t) for t in normalized_candidate.split()} - {""}
    place_tokens = {normalize_token(t) for t in normalized_place.split()} - {""}
    return bool(candidate_tokens & place_tokens)


def _acceptable(window: list[_Word], place_text: str | None, index: StopWordIndex) -> bool:
    candidate = " ".join(word.text for word in window)
    if DIGIT.search(candidate):
        return False
    if any(index.is_stop_word_token(word.text) for word in window):
        return False
    return not _inside_place(candidate, place_text)


def _accepted_windows(
    run: list[_Word],
    place_text: str | None,
    index: StopWordIndex,
) -> Iterator[list[_Word]]:
    """Walk a run left to right, preferring three-word windows over two-word ones."""
    position = 0
    while position < len(run):
        for size in range(MAX_NAME_WORDS, MIN_NAME_WORDS - 1, -1):
            window = run[position:position + size]
            if len(window) == size and _acceptable(window, place_text, index):
                yield window
                position += size
                break
        else:
            position += 1


def extract_name(text: str, place_text: str | None, index: StopWordIndex) -> str | None:
    """Extract the user's full name from normalized text.

    Among all acceptable candidates the one starting latest wins.

    Args:
        text: Normalized message text
        place_text: Place phrase (or provisional guess) the name must not overlap
        index: Stop-word index

    Returns:
        Name joined with single spaces, or None
    """
    if not text:
        return None

    best: list[_Word] | None = None
    for run in _capitalized_runs(text):
        for window in _accepted_windows(run, place_text, index):
            if best is None or window[0].start >= best[0].start:
                best = window

    if best is None:
        return None
    return " ".join(word.text for word in best)


def looks_like_name(fragment: str) -> bool:
    """Check whether a fragment is exactly two or three capitalized words."""
    if not fragment or DIGIT.search(fragment):
        return False

    words = fragment.split()
    if not MIN_NAME_WORDS <= len(words) <= MAX_NAME_WORDS:
        return False
    return all(NAME_WORD.fullmatch(word) is not None and _is_name_word(word) for word in words)
