"""Root conftest for all tests.

Shared fixtures: a stop-word index seeded with a small place catalog and a
parser pinned to a fixed "today" so inferred years are deterministic.
"""

from datetime import date, datetime

import pytest

from shiftbot.matching.types import SlotCandidate
from shiftbot.parsing.parser import ShiftRequestParser
from shiftbot.stopwords.index import StopWordIndex

TODAY = date(2025, 12, 1)

CATALOG_PHRASES = [
    "нова пошта",
    "Стрижавка",
    "стрижавк",
    "Стрижовка",
    "Якова Шепеля",
    "Киев",
]


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def stop_word_index() -> StopWordIndex:
    """Index seeded with the test catalog."""
    return StopWordIndex(CATALOG_PHRASES, min_token_length=3)


@pytest.fixture
def parser(stop_word_index: StopWordIndex) -> ShiftRequestParser:
    """Parser with a fixed reference day."""
    return ShiftRequestParser(stop_word_index, today=lambda: TODAY)


def _make_slot(
    slot_id: int,
    place: str,
    start: datetime,
    end: datetime,
    capacity: int = 5,
    booked: int = 0,
) -> SlotCandidate:
    """Build a slot candidate with sensible defaults."""
    return SlotCandidate(
        id=slot_id,
        place_name=place,
        start=start,
        end=end,
        capacity=capacity,
        booked_count=booked,
    )


@pytest.fixture
def make_slot():
    """Factory for slot candidates."""
    return _make_slot
