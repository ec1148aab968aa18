"""Tests for the scheduled stop-word refresh."""

from shiftbot.integrations.protocols import CatalogPlace
from shiftbot.stopwords.index import StopWordIndex
from shiftbot.stopwords.refresher import JOB_ID, StopWordRefresher


class _Catalog:
    def __init__(self):
        self.calls = 0

    def list_visible_places(self):
        self.calls += 1
        return [CatalogPlace(name="Стрижавка")]

    def list_visible_cities(self):
        return ["Вінниця"]


class TestStopWordRefresher:
    """Test StopWordRefresher."""

    def test_start_refreshes_immediately_and_schedules(self):
        """Test the initial refresh and periodic job registration."""
        index = StopWordIndex(min_token_length=3)
        catalog = _Catalog()
        refresher = StopWordRefresher(index, catalog, interval_seconds=3600)

        try:
            refresher.start()

            assert catalog.calls == 1
            assert index.snapshot() == frozenset({"стрижавка", "вінниця"})
            assert refresher.running
            assert refresher._scheduler.get_job(JOB_ID) is not None
        finally:
            refresher.shutdown()

        assert not refresher.running

    def test_interval_defaults_to_settings(self):
        """Test the default refresh period."""
        refresher = StopWordRefresher(StopWordIndex(min_token_length=3), _Catalog())

        assert refresher.interval_seconds == 300

    def test_refresh_now(self):
        """Test a manual refresh."""
        index = StopWordIndex(min_token_length=3)
        refresher = StopWordRefresher(index, _Catalog(), interval_seconds=3600)

        assert refresher.refresh_now() is True
        assert index.size == 2
