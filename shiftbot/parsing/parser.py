"""Shift request parser.

Turns one free-form chat message into a ParsedShiftRequest:

    "Кириченко Микита (18-9)\\nСтрижавка 9.12"
        -> date=2025-12-09, 18:00-09:00, place="Стрижавка", name="Кириченко Микита"

Pipeline: normalize -> provisional place guess -> name -> place -> date -> time.
Messages without any date or time, and messages carrying neither a location
token nor a name, are not shift requests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from loguru import logger

from shiftbot.parsing.dates import extract_date
from shiftbot.parsing.names import extract_name
from shiftbot.parsing.places import extract_place, guess_place
from shiftbot.parsing.times import extract_time_range
from shiftbot.parsing.types import ParsedShiftRequest
from shiftbot.stopwords.index import StopWordIndex
from shiftbot.text.normalize import normalize_message, split_lines


class ShiftRequestParser:
    """Stateless parser over a shared stop-word index."""

    def __init__(self, index: StopWordIndex, today: Callable[[], date] | None = None) -> None:
        """Initialize the parser.

        Args:
            index: Stop-word index used to tell places from names
            today: Clock for year inference (defaults to date.today)
        """
        self._index = index
        self._today = today or date.today

    @property
    def index(self) -> StopWordIndex:
        return self._index

    def parse(self, raw: str | None) -> ParsedShiftRequest | None:
        """Parse a raw message.

        Args:
            raw: Message text as received

        Returns:
            ParsedShiftRequest, or None when the message is not a shift request
        """
        if raw is None or not raw.strip():
            return None

        text = normalize_message(raw)
        if not text:
            return None
        lines = split_lines(text)

        has_location = self._index.contains_any_location_token(text)
        provisional_place = guess_place(lines, self._index) if has_location else None

        name = extract_name(text, provisional_place, self._index)
        place = extract_place(lines, self._index, name) if has_location else None

        request_date = extract_date(text, self._today())
        times = extract_time_range(text)

        if request_date is None and times.is_empty:
            logger.debug("Message rejected: no date or time", length=len(text))
            return None

        if not has_location and name is None:
            logger.debug("Message rejected: no location token and no name", length=len(text))
            return None

        request = ParsedShiftRequest(
            date=request_date,
            start_time=times.start,
            end_time=times.end,
            place_text=place,
            user_full_name=name,
        )
        logger.info(
            "Parsed shift request",
            date=str(request.date) if request.date else None,
            start=str(request.start_time) if request.start_time else None,
            end=str(request.end_time) if request.end_time else None,
            place=request.place_text,
            has_name=request.user_full_name is not None,
        )
        return request

    def is_likely_shift_request(self, raw: str | None) -> bool:
        """Quick classifier for incoming chat messages."""
        request = self.parse(raw)
        if request is None:
            return False
        return request.has_temporal_anchor or bool(request.place_text)

    def extract_name_only(self, raw: str | None) -> str | None:
        """Extract just a name, used to recover a user's full name from a message.

        Args:
            raw: Message text as received

        Returns:
            Name, or None
        """
        if raw is None or not raw.strip():
            return None

        text = normalize_message(raw)
        lines = split_lines(text)
        provisional_place = (
            guess_place(lines, self._index) if self._index.contains_any_location_token(text) else None
        )
        return extract_name(text, provisional_place, self._index)
