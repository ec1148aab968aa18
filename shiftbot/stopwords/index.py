"""Stop-word index: known place and city name tokens.

The index is read by every parse and refreshed in the background from the
place catalog. Each refresh builds a brand new frozenset and publishes it
with a single attribute assignment, so a reader holding the previous
snapshot keeps iterating it undisturbed and never sees a half-built set.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from loguru import logger

from shiftbot.config.settings import settings
from shiftbot.integrations.protocols import PlaceCatalog
from shiftbot.text.normalize import normalize_phrase, normalize_token


class StopWordIndex:
    """Set of normalized location tokens with partial (substring) matching.

    A token matches when it is contained in, or contains, a catalog token.
    Tokens shorter than `min_token_length` and purely numeric tokens are
    ignored on both sides.
    """

    def __init__(self, tokens: Iterable[str] = (), min_token_length: int | None = None) -> None:
        """Initialize the index.

        Args:
            tokens: Initial catalog words or phrases
            min_token_length: Shortest token that can count as a location token
                (defaults to settings.stopword_min_token_length)
        """
        self._min_token_length = (
            min_token_length if min_token_length is not None else settings.stopword_min_token_length
        )
        self._write_lock = threading.Lock()
        self._snapshot: frozenset[str] = self._build(tokens)

    @property
    def min_token_length(self) -> int:
        return self._min_token_length

    @property
    def size(self) -> int:
        return len(self._snapshot)

    def snapshot(self) -> frozenset[str]:
        """Return the currently published token set."""
        return self._snapshot

    def _usable(self, token: str) -> bool:
        return len(token) >= self._min_token_length and not token.isdigit()

    def _build(self, phrases: Iterable[str]) -> frozenset[str]:
        built: set[str] = set()
        for phrase in phrases:
            for token in normalize_phrase(phrase).split():
                if self._usable(token):
                    built.add(token)
        return frozenset(built)

    def replace(self, phrases: Iterable[str]) -> int:
        """Publish a new snapshot built from the given phrases.

        Args:
            phrases: Place and city names (any case, any punctuation)

        Returns:
            Number of tokens in the new snapshot
        """
        updated = self._build(phrases)
        with self._write_lock:
            self._snapshot = updated
        return len(updated)

    def refresh(self, catalog: PlaceCatalog) -> bool:
        """Rebuild the snapshot from visible cities and places.

        On catalog failure the previous snapshot stays published.

        Args:
            catalog: Place/city catalog

        Returns:
            True if a new snapshot was published
        """
        try:
            phrases: list[str] = list(catalog.list_visible_cities())
            for place in catalog.list_visible_places():
                phrases.append(place.name)
                if place.city_name:
                    phrases.append(place.city_name)
        except Exception as e:
            logger.warning(
                "Failed to refresh stop-words, keeping previous snapshot",
                error=str(e),
                entries=self.size,
            )
            return False

        count = self.replace(phrases)
        logger.info("Stop-words refreshed", entries=count)
        return True

    def is_stop_word_token(self, raw_token: str | None) -> bool:
        """Check whether a single token is location-like.

        Args:
            raw_token: Token as written by the user

        Returns:
            True if the token equals, contains, or is contained in a catalog token
        """
        token = normalize_token(raw_token)
        if not self._usable(token):
            return False

        snapshot = self._snapshot
        if token in snapshot:
            return True
        return any(stop_word in token or token in stop_word for stop_word in snapshot)

    def location_tokens(self, text: str | None) -> list[str]:
        """Return the words of `text` that are location tokens, in order."""
        if not text:
            return []
        return [word for word in text.split() if self.is_stop_word_token(word)]

    def contains_any_location_token(self, text: str | None) -> bool:
        """Check whether any word of `text` is a location token."""
        if not text:
            return False
        return any(self.is_stop_word_token(word) for word in normalize_phrase(text).split())
