"""Stop-word (location token) index and its refresh job."""

from shiftbot.stopwords.index import StopWordIndex
from shiftbot.stopwords.refresher import StopWordRefresher

__all__ = ["StopWordIndex", "StopWordRefresher"]
