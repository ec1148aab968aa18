"""Background refresh of the stop-word index from the place catalog."""

from __future__ import annotations

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from shiftbot.config.settings import settings
from shiftbot.integrations.protocols import PlaceCatalog
from shiftbot.stopwords.index import StopWordIndex

JOB_ID = "stopword_refresh"


class StopWordRefresher:
    """Periodically rebuilds a StopWordIndex on a BackgroundScheduler.

    Parses never wait for a refresh: the index publishes each rebuilt
    snapshot in one step.
    """

    def __init__(
        self,
        index: StopWordIndex,
        catalog: PlaceCatalog,
        interval_seconds: int | None = None,
        scheduler: BackgroundScheduler | None = None,
    ) -> None:
        """Initialize the refresher.

        Args:
            index: Index to refresh
            catalog: Place catalog to read from
            interval_seconds: Refresh period (defaults to settings.stopword_refresh_seconds)
            scheduler: Scheduler to register on (a private one is created if omitted)
        """
        self.index = index
        self.catalog = catalog
        self.interval_seconds = interval_seconds or settings.stopword_refresh_seconds
        self._scheduler = scheduler or BackgroundScheduler()
        self._owns_scheduler = scheduler is None

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def refresh_now(self) -> bool:
        """Run one refresh in the calling thread."""
        return self.index.refresh(self.catalog)

    def start(self) -> None:
        """Run an initial refresh, then schedule the periodic job."""
        self.refresh_now()

        self._scheduler.add_job(
            self.refresh_now,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            name="Stop-word Refresh",
            replace_existing=True,
        )
        if not self._scheduler.running:
            self._scheduler.start()
        logger.info("[SCHEDULER] Started stop-word refresh", interval_seconds=self.interval_seconds)

    def shutdown(self) -> None:
        """Stop the periodic job (and the scheduler, if this refresher created it)."""
        if self._scheduler.get_job(JOB_ID) is not None:
            self._scheduler.remove_job(JOB_ID)
        if self._owns_scheduler and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        logger.info("[SCHEDULER] Stopped stop-word refresh")
