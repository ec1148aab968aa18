"""Candidate scoring.

Three independent sub-scores in [0, 1] combined by a fixed weight table:

| Signal | Weight | Present when                        |
|--------|--------|-------------------------------------|
| place  | 0.50   | the request has usable place tokens |
| time   | 0.35   | the request has a start or end time |
| date   | 0.15   | always (parsed date or recency)     |

Weights of absent signals are dropped and the rest renormalized, so a missing
signal never drags a candidate down. A request carrying nothing but a date is
capped below the acceptance threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from shiftbot.config.settings import settings
from shiftbot.matching.similarity import place_score
from shiftbot.matching.types import SlotCandidate, SlotMatch
from shiftbot.parsing.types import ParsedShiftRequest

PLACE_WEIGHT = 0.50
TIME_WEIGHT = 0.35
DATE_WEIGHT = 0.15

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class MatchConfig:
    """Matcher tunables."""

    min_score: float = 0.55
    tie_tolerance: float = 0.01
    time_diff_cap_minutes: int = 180
    overlap_bonus: float = 0.10
    recency_horizon_days: int = 14
    date_only_score_cap: float = 0.50

    @classmethod
    def from_settings(cls) -> MatchConfig:
        """Build a config from SHIFTBOT_MATCH_* settings."""
        return cls(
            min_score=settings.match_min_score,
            tie_tolerance=settings.match_tie_tolerance,
            time_diff_cap_minutes=settings.match_time_diff_cap_minutes,
            overlap_bonus=settings.match_overlap_bonus,
            recency_horizon_days=settings.match_recency_horizon_days,
            date_only_score_cap=settings.match_date_only_score_cap,
        )


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def clock_distance_minutes(left: time, right: time) -> int:
    """Minutes between two clock times around the dial (23:59 vs 00:00 is 1)."""
    diff = abs(_minutes(left) - _minutes(right)) % MINUTES_PER_DAY
    return min(diff, MINUTES_PER_DAY - diff)


def _interval(start: int, end: int) -> tuple[int, int]:
    """Close an interval on the minute axis, wrapping overnight ends past midnight."""
    if end < start:
        end += MINUTES_PER_DAY
    return start, end


def _overlaps(requested: tuple[int, int], offered: tuple[int, int]) -> bool:
    requested_start, requested_end = requested
    offered_start, offered_end = offered
    for shift in (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY):
        if requested_start + shift <= offered_end and offered_start <= requested_end + shift:
            return True
    return False


def _offered_interval(candidate: SlotCandidate) -> tuple[int, int]:
    start = _minutes(candidate.start.time())
    duration = max(0, int((candidate.end - candidate.start).total_seconds() // 60))
    return start, start + duration


def _requested_interval(start: time | None, end: time | None) -> tuple[int, int] | None:
    if start is not None and end is not None:
        return _interval(_minutes(start), _minutes(end))
    point = start or end
    if point is None:
        return None
    return _minutes(point), _minutes(point)


def time_score(request: ParsedShiftRequest, candidate: SlotCandidate, config: MatchConfig) -> float:
    """Closeness of the candidate's interval to the requested times.

    Args:
        request: Parsed request
        candidate: Slot candidate
        config: Matcher tunables

    Returns:
        Score in [0, 1]; 0.0 when the request carries no time
    """
    cap = config.time_diff_cap_minutes
    side_scores: list[float] = []
    if request.start_time is not None:
        diff = clock_distance_minutes(request.start_time, candidate.start.time())
        side_scores.append(1.0 - min(diff, cap) / cap)
    if request.end_time is not None:
        diff = clock_distance_minutes(request.end_time, candidate.end.time())
        side_scores.append(1.0 - min(diff, cap) / cap)

    if not side_scores:
        return 0.0

    score = sum(side_scores) / len(side_scores)
    requested = _requested_interval(request.start_time, request.end_time)
    if requested is not None and _overlaps(requested, _offered_interval(candidate)):
        score += config.overlap_bonus
    return min(score, 1.0)


def date_score(request: ParsedShiftRequest, candidate: SlotCandidate, config: MatchConfig, today: date) -> float:
    """Exact-date credit, or recency decay when the request has no date."""
    slot_day = candidate.start.date()
    if request.date is not None:
        return 1.0 if slot_day == request.date else 0.0

    days_ahead = (slot_day - today).days
    if days_ahead < 0:
        return 0.0
    return max(0.0, 1.0 - days_ahead / config.recency_horizon_days)


def combine(
    place: float | None,
    time_: float | None,
    date_: float,
    config: MatchConfig,
) -> float:
    """Weighted average over present signals.

    Args:
        place: Place sub-score, None when the request has no place tokens
        time_: Time sub-score, None when the request has no time
        date_: Date sub-score
        config: Matcher tunables

    Returns:
        Combined score in [0, 1]
    """
    weighted = DATE_WEIGHT * date_
    total_weight = DATE_WEIGHT
    if place is not None:
        weighted += PLACE_WEIGHT * place
        total_weight += PLACE_WEIGHT
    if time_ is not None:
        weighted += TIME_WEIGHT * time_
        total_weight += TIME_WEIGHT

    score = weighted / total_weight
    if place is None and time_ is None:
        score = min(score, config.date_only_score_cap)
    return score


def score_candidate(
    request: ParsedShiftRequest,
    request_tokens: list[str],
    candidate: SlotCandidate,
    config: MatchConfig,
    today: date,
) -> SlotMatch:
    """Score one candidate against a request.

    Args:
        request: Parsed request
        request_tokens: Place tokens of the request (may be empty)
        candidate: Slot candidate
        config: Matcher tunables
        today: Reference day for recency decay

    Returns:
        SlotMatch carrying the combined score and its breakdown
    """
    place = place_score(request_tokens, candidate.place_name) if request_tokens else None
    time_ = time_score(request, candidate, config) if request.has_time else None
    date_ = date_score(request, candidate, config, today)

    return SlotMatch(
        slot=candidate,
        score=combine(place, time_, date_, config),
        place_score=place or 0.0,
        time_score=time_ or 0.0,
        date_score=date_,
    )


def rank_key(match: SlotMatch) -> tuple[float, float, datetime, int]:
    """Sort key: score desc, place score desc, earliest start, id."""
    return (-match.score, -match.place_score, match.slot.start, match.slot.id)
