"""Tests for the stop-word index."""

import threading

from shiftbot.integrations.protocols import CatalogPlace
from shiftbot.stopwords.index import StopWordIndex


class _Catalog:
    def __init__(self, places=None, cities=None, error=None):
        self.places = places or []
        self.cities = cities or []
        self.error = error

    def list_visible_places(self):
        if self.error:
            raise self.error
        return self.places

    def list_visible_cities(self):
        if self.error:
            raise self.error
        return self.cities


class TestStopWordMatching:
    """Test token matching."""

    def test_exact_and_case_insensitive(self, stop_word_index):
        """Test plain membership."""
        assert stop_word_index.is_stop_word_token("Стрижавка")
        assert stop_word_index.is_stop_word_token("СТРИЖАВКА,")

    def test_substring_both_directions(self):
        """Test that a token inside, or around, a catalog token matches."""
        index = StopWordIndex(["Стрижавка"], min_token_length=3)

        assert index.is_stop_word_token("стрижав")
        assert index.is_stop_word_token("Стрижавкаа")

    def test_short_and_numeric_tokens_never_match(self):
        """Test the minimum token length and digit filters."""
        index = StopWordIndex(["Склад №5", "з"], min_token_length=3)

        assert index.snapshot() == frozenset({"склад"})
        assert not index.is_stop_word_token("з")
        assert not index.is_stop_word_token("5")
        assert not index.is_stop_word_token("ск")

    def test_location_tokens_in_order(self, stop_word_index):
        """Test that location words are returned as written."""
        assert stop_word_index.location_tokens("Якова Шепеля 9.12 Дима") == ["Якова", "Шепеля"]

    def test_contains_any_location_token(self, stop_word_index):
        """Test the message-level check."""
        assert stop_word_index.contains_any_location_token("пошта 11.12\nДима")
        assert not stop_word_index.contains_any_location_token("11.12 Дима Маслов")
        assert not stop_word_index.contains_any_location_token(None)

    def test_empty_index_matches_nothing(self):
        """Test an index with no catalog loaded."""
        index = StopWordIndex(min_token_length=3)

        assert index.size == 0
        assert not index.contains_any_location_token("Стрижавка 9.12")


class TestStopWordRefresh:
    """Test catalog refresh."""

    def test_refresh_collects_cities_places_and_place_cities(self):
        """Test that every catalog name becomes tokens."""
        index = StopWordIndex(min_token_length=3)
        catalog = _Catalog(
            places=[CatalogPlace(name="Якова Шепеля", city_name="Вінниця")],
            cities=["Гайсин"],
        )

        assert index.refresh(catalog) is True
        assert index.snapshot() == frozenset({"якова", "шепеля", "вінниця", "гайсин"})

    def test_refresh_failure_keeps_previous_snapshot(self, stop_word_index):
        """Test that a failing catalog leaves the published set untouched."""
        before = stop_word_index.snapshot()

        refreshed = stop_word_index.refresh(_Catalog(error=RuntimeError("catalog down")))

        assert refreshed is False
        assert stop_word_index.snapshot() is before

    def test_replace_publishes_new_snapshot(self, stop_word_index):
        """Test that replace swaps the whole set."""
        old = stop_word_index.snapshot()

        count = stop_word_index.replace(["Гайсин"])

        assert count == 1
        assert stop_word_index.snapshot() == frozenset({"гайсин"})
        assert "стрижавка" in old

    def test_readers_see_whole_snapshots_only(self):
        """Test that concurrent readers observe either the old or the new set."""
        first = ["Стрижавка", "Гайсин"]
        second = ["Якова Шепеля", "Вінниця"]
        index = StopWordIndex(first, min_token_length=3)
        expected = {index.snapshot(), StopWordIndex(second, min_token_length=3).snapshot()}
        observed = []
        stop = threading.Event()

        def read():
            while not stop.is_set():
                observed.append(index.snapshot())

        readers = [threading.Thread(target=read) for _ in range(4)]
        for reader in readers:
            reader.start()
        for i in range(200):
            index.replace(second if i % 2 == 0 else first)
        stop.set()
        for reader in readers:
            reader.join()

        assert observed
        assert set(observed) <= expected
