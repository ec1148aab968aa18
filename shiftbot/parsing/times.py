"""Time-range extraction for shift messages.

Date literals are blanked first. Strategies, first usable hit wins:
1. four time parts: "18:00-23:00", "18.0023.00", "18:00 23:00"
2. dash range: "18-09", "7-23", "з 9:30 - 18" (two-sided beats one-sided)
3. "from X to Y": "з 7 до 23", "9 to 18", "10 по 22"
4. a lone clock time: "18:00" (start only)
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import time

from shiftbot.parsing.dates import blank_dates
from shiftbot.parsing.patterns import (
    CLOCK_TIME,
    TIME_FOUR_PARTS,
    TIME_FROM_TO,
    TIME_RANGE,
)

END_OF_DAY = time(23, 59)


@dataclass(frozen=True)
class TimeRange:
    """Requested shift interval; either side may be missing."""

    start: time | None = None
    end: time | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None


def parse_time_token(token: str | None) -> time | None:
    """Parse a bare hour ("9", "24") or clock time ("9:30", "18.00").

    Hour 24 means end of day and becomes 23:59. Out-of-range values give None.
    """
    if not token or not token.strip():
        return None

    safe = token.strip().replace(".", ":")
    hour_str, _, minute_str = safe.partition(":")
    if not hour_str.isdigit() or (minute_str and not minute_str.isdigit()):
        return None

    hour = int(hour_str)
    minute = int(minute_str) if minute_str else 0

    if hour == 24 and minute == 0:
        return END_OF_DAY
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _both_too_short(start: str | None, end: str | None) -> bool:
    """A pair of single bare digits ("7-9") is too ambiguous to be a shift."""
    if start is None or end is None:
        return False
    return len(start) == 1 and len(end) == 1


def _from_four_parts(text: str) -> TimeRange | None:
    for match in TIME_FOUR_PARTS.finditer(text):
        found = TimeRange(parse_time_token(match.group(1)), parse_time_token(match.group(2)))
        if not found.is_empty:
            return found
    return None


def _overlapping_matches(pattern: re.Pattern[str], text: str) -> Iterator[re.Match[str]]:
    """Yield matches starting at every position, including ones that overlap."""
    match = pattern.search(text)
    while match is not None:
        yield match
        match = pattern.search(text, match.start() + 1)


def _from_ranges(text: str) -> TimeRange | None:
    """First two-sided range, else the first one-sided one.

    "Стрижавка - 18-23" holds both " - 18" and "18-23"; the full range wins.
    """
    one_sided: TimeRange | None = None
    for pattern in (TIME_RANGE, TIME_FROM_TO):
        for match in _overlapping_matches(pattern, text):
            start_str = match.group("start")
            end_str = match.group("end")
            if start_str is None and end_str is None:
                continue
            if _both_too_short(start_str, end_str):
                continue

            found = TimeRange(parse_time_token(start_str), parse_time_token(end_str))
            if found.start is not None and found.end is not None:
                return found
            if one_sided is None and not found.is_empty:
                one_sided = found
    return one_sided


def _from_clock_time(text: str) -> TimeRange | None:
    for match in CLOCK_TIME.finditer(text):
        start = parse_time_token(match.group(1))
        if start is not None:
            return TimeRange(start=start)
    return None


def extract_time_range(text: str) -> TimeRange:
    """Extract the requested start/end time from normalized text.

    Args:
        text: Normalized message text

    Returns:
        TimeRange, empty when no time signal is present
    """
    if not text:
        return TimeRange()

    # "2025-12-09" would read as "12-09" and "9.12" as 9:12
    searchable = blank_dates(text)

    for strategy in (_from_four_parts, _from_ranges, _from_clock_time):
        found = strategy(searchable)
        if found is not None:
            return found

    return TimeRange()
