"""Date extraction for shift messages.

Two shapes, tried in order:
- dotted/slashed: "9.12", "06.12(сб)", "11.12.2025", "1/3/26"
- ISO: "2025-12-09"

A year left out by the user is the current year, moved one year ahead when
that date is already behind us (people book December shifts in January
without typing the year).
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from loguru import logger

from shiftbot.parsing.patterns import DATE_DOTTED, DATE_ISO


def _build_date(day_str: str, month_str: str, year_str: str | None, today: date) -> date | None:
    """Build a calendar date from captured groups.

    Args:
        day_str: Day group
        month_str: Month group
        year_str: Year group (may be None, two or four digits)
        today: Reference day for year inference

    Returns:
        Date, or None when the groups do not form a real date
    """
    try:
        day = int(day_str)
        month = int(month_str)
        if year_str is not None:
            year = int(year_str)
            if year < 100:
                year += 2000
            return date(year, month, day)

        candidate = date(today.year, month, day)
        if candidate < today - timedelta(days=1):
            candidate = date(today.year + 1, month, day)
        return candidate
    except ValueError as e:
        logger.debug(
            "Skipping malformed date literal",
            day=day_str,
            month=month_str,
            year=year_str,
            reason=str(e),
        )
        return None


def extract_date(text: str, today: date | None = None) -> date | None:
    """Extract the first valid calendar date from normalized text.

    Args:
        text: Normalized message text
        today: Reference day for year inference (defaults to date.today())

    Returns:
        Parsed date, or None when the text carries no valid date
    """
    if not text:
        return None

    reference = today or date.today()

    for match in DATE_DOTTED.finditer(text):
        parsed = _build_date(match.group(1), match.group(2), match.group(3), reference)
        if parsed is not None:
            return parsed

    for match in DATE_ISO.finditer(text):
        parsed = _build_date(match.group(3), match.group(2), match.group(1), reference)
        if parsed is not None:
            return parsed

    return None


def _is_calendar_date(day_str: str, month_str: str, year_str: str | None) -> bool:
    try:
        year = int(year_str) if year_str is not None else 2000
        if year < 100:
            year += 2000
        date(year, int(month_str), int(day_str))
    except ValueError:
        return False
    return True


def blank_dates(text: str) -> str:
    """Replace every date literal with a space.

    A dotted literal is only blanked when it reads as a real calendar date,
    so "18.00" survives as a clock time while "9.12" goes.
    """

    def _dotted(match: re.Match[str]) -> str:
        if _is_calendar_date(match.group(1), match.group(2), match.group(3)):
            return " "
        return match.group(0)

    return DATE_DOTTED.sub(_dotted, DATE_ISO.sub(" ", text))
