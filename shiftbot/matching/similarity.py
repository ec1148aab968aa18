"""Place name similarity.

Request place phrases are compared token by token with candidate place names.
Each request token earns the best credit it can get from any candidate token:

| Relation                          | Credit |
|-----------------------------------|--------|
| equal                             | 1.0    |
| one contains the other            | 0.9    |
| edit distance of at most one      | 0.75   |
| anything else                     | 0.0    |
"""

from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein

from shiftbot.text.normalize import normalize_phrase

EXACT_TOKEN_CREDIT = 1.0
CONTAINED_TOKEN_CREDIT = 0.9
FUZZY_TOKEN_CREDIT = 0.75

MAX_FUZZY_DISTANCE = 1
MIN_COMPARABLE_LENGTH = 3
MIN_PLACE_TOKEN_LENGTH = 2

# Common shorthand for the parcel-locker chain, in the three spellings users type
PLACE_ALIASES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bнп\b"), "нова пошта"),
    (re.compile(r"\bnp\b"), "нова пошта"),
    (re.compile(r"\bновая?\s+пошта\b"), "нова пошта"),
)


def normalize_place(text: str | None) -> str:
    """Lowercase a place phrase, expand aliases and drop punctuation.

    Args:
        text: Raw place text

    Returns:
        Normalized phrase, tokens separated by single spaces
    """
    if not text:
        return ""

    lowered = text.lower().replace("№", " ")
    for pattern, replacement in PLACE_ALIASES:
        lowered = pattern.sub(replacement, lowered)
    return normalize_phrase(lowered)


def place_tokens(text: str | None) -> list[str]:
    """Split a place phrase into comparable tokens (longer than one character)."""
    return [token for token in normalize_place(text).split() if len(token) >= MIN_PLACE_TOKEN_LENGTH]


def is_near_miss(left: str, right: str) -> bool:
    """Check whether two tokens are at most MAX_FUZZY_DISTANCE edits apart."""
    return Levenshtein.distance(left, right, score_cutoff=MAX_FUZZY_DISTANCE) <= MAX_FUZZY_DISTANCE


def token_similarity(request_token: str, candidate_token: str) -> float:
    """Credit one request token earns against one candidate token."""
    if not request_token or not candidate_token:
        return 0.0
    if request_token == candidate_token:
        return EXACT_TOKEN_CREDIT

    shorter = min(len(request_token), len(candidate_token))
    if shorter >= MIN_COMPARABLE_LENGTH and (request_token in candidate_token or candidate_token in request_token):
        return CONTAINED_TOKEN_CREDIT

    if shorter >= MIN_COMPARABLE_LENGTH and is_near_miss(request_token, candidate_token):
        return FUZZY_TOKEN_CREDIT

    return 0.0


def place_score(request_tokens: list[str], candidate_place: str | None) -> float:
    """Mean best credit of the request tokens against a candidate place name.

    Args:
        request_tokens: Tokens from place_tokens() of the request
        candidate_place: Candidate's place name

    Returns:
        Score in [0, 1]; 0.0 when either side has no tokens
    """
    candidate_tokens = place_tokens(candidate_place)
    if not request_tokens or not candidate_tokens:
        return 0.0

    total = 0.0
    for request_token in request_tokens:
        total += max(token_similarity(request_token, candidate_token) for candidate_token in candidate_tokens)
    return total / len(request_tokens)
