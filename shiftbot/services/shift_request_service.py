"""Shift request resolution service.

Data flow for one chat message:

    raw text -> ShiftRequestParser.parse -> ScheduleLookup -> find_matching_slot

Candidates come from the parsed date when there is one, otherwise from the
upcoming feed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from loguru import logger

from shiftbot.integrations.protocols import ScheduleLookup
from shiftbot.matching.matcher import find_matching_slot
from shiftbot.matching.scoring import MatchConfig
from shiftbot.matching.types import SlotCandidate, SlotMatchResult
from shiftbot.parsing.parser import ShiftRequestParser
from shiftbot.parsing.types import ParsedShiftRequest

MIN_FULL_NAME_WORDS = 2


@dataclass(frozen=True)
class ShiftResolution:
    """Parsed request together with its ranked slots."""

    request: ParsedShiftRequest
    result: SlotMatchResult


def has_valid_full_name(name: str | None) -> bool:
    """Check whether a stored name has at least first and last name."""
    return name is not None and len(name.split()) >= MIN_FULL_NAME_WORDS


class ShiftRequestService:
    """Parses chat messages and resolves them against the schedule."""

    def __init__(
        self,
        parser: ShiftRequestParser,
        schedule: ScheduleLookup,
        config: MatchConfig | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.parser = parser
        self.schedule = schedule
        self.config = config or MatchConfig.from_settings()
        self._today = today or date.today

    def candidates_for(self, request: ParsedShiftRequest) -> list[SlotCandidate]:
        """Candidate pool for a request."""
        if request.date is not None:
            return self.schedule.get_slots_for_date(request.date)
        return self.schedule.get_upcoming_slots()

    def resolve(self, raw: str | None) -> ShiftResolution | None:
        """Parse a message and match it against the schedule.

        Args:
            raw: Message text as received

        Returns:
            ShiftResolution (its result may be empty), or None when the message
            is not a shift request
        """
        request = self.parser.parse(raw)
        if request is None:
            return None

        candidates = self.candidates_for(request)
        result = find_matching_slot(request, candidates, self.config, self._today())
        if not result.found():
            logger.info("No slot matched shift request", candidates=len(candidates), place=request.place_text)
        elif result.is_ambiguous():
            logger.info("Shift request is ambiguous", options=len(result.matches))
        return ShiftResolution(request=request, result=result)

    def resolve_full_name(self, current: str | None, fallback_text: str | None) -> str | None:
        """Pick the user's full name: keep a valid stored one, else recover it from a message.

        Args:
            current: Name already known for the user
            fallback_text: Message to extract a name from

        Returns:
            A valid full name, or None
        """
        if has_valid_full_name(current):
            return current

        recovered = self.parser.extract_name_only(fallback_text)
        if has_valid_full_name(recovered):
            logger.debug("Recovered full name from message", words=len(recovered.split()))
            return recovered
        return None
