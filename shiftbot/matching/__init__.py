"""Slot matching: similarity, scoring and ranking of candidate slots."""

from shiftbot.matching.availability import SlotAvailability, calculate_availability
from shiftbot.matching.matcher import find_matching_slot
from shiftbot.matching.scoring import DATE_WEIGHT, PLACE_WEIGHT, TIME_WEIGHT, MatchConfig
from shiftbot.matching.types import SlotCandidate, SlotMatch, SlotMatchResult

__all__ = [
    "DATE_WEIGHT",
    "PLACE_WEIGHT",
    "TIME_WEIGHT",
    "MatchConfig",
    "SlotAvailability",
    "SlotCandidate",
    "SlotMatch",
    "SlotMatchResult",
    "calculate_availability",
    "find_matching_slot",
]
