"""Shift message parsing."""

from shiftbot.parsing.parser import ShiftRequestParser
from shiftbot.parsing.times import TimeRange
from shiftbot.parsing.types import ParsedShiftRequest

__all__ = ["ParsedShiftRequest", "ShiftRequestParser", "TimeRange"]
