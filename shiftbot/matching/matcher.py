"""Slot matcher: resolve a parsed request against candidate slots."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from loguru import logger

from shiftbot.matching.scoring import MatchConfig, rank_key, score_candidate
from shiftbot.matching.similarity import place_tokens
from shiftbot.matching.types import SlotCandidate, SlotMatchResult
from shiftbot.parsing.types import ParsedShiftRequest


def find_matching_slot(
    request: ParsedShiftRequest,
    candidates: Sequence[SlotCandidate],
    config: MatchConfig | None = None,
    today: date | None = None,
) -> SlotMatchResult:
    """Rank candidates and keep the near-tied best ones.

    Candidates scoring below `config.min_score` are discarded. Survivors within
    `config.tie_tolerance` of the best score are returned, best first. An empty
    result means no acceptable slot; more than one entry means the caller should
    let the user choose.

    Args:
        request: Parsed shift request
        candidates: Slots to rank (never modified)
        config: Matcher tunables (defaults to MatchConfig.from_settings())
        today: Reference day for recency decay (defaults to date.today())

    Returns:
        SlotMatchResult, possibly empty
    """
    if not candidates:
        logger.debug("No candidates to match")
        return SlotMatchResult()

    active_config = config or MatchConfig.from_settings()
    reference_day = today or date.today()
    tokens = place_tokens(request.place_text)

    scored = [score_candidate(request, tokens, candidate, active_config, reference_day) for candidate in candidates]
    accepted = [match for match in scored if match.score >= active_config.min_score]
    if not accepted:
        logger.info(
            "No slot scored above threshold",
            candidates=len(candidates),
            best_score=round(max(match.score for match in scored), 4),
            min_score=active_config.min_score,
        )
        return SlotMatchResult()

    best_score = max(match.score for match in accepted)
    threshold = best_score - active_config.tie_tolerance
    retained = sorted((match for match in accepted if match.score >= threshold), key=rank_key)

    logger.info(
        "Matched shift request",
        candidates=len(candidates),
        retained=len(retained),
        best_slot_id=retained[0].slot.id,
        best_score=round(best_score, 4),
    )
    return SlotMatchResult(matches=tuple(retained))
