"""Slot matching data contracts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shiftbot.matching.availability import SlotAvailability, calculate_availability


class SlotCandidate(BaseModel):
    """Bookable slot as served by the scheduling backend.

    Read-only to the engine: the matcher ranks candidates, it never edits them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    place_name: str = Field(alias="placeName")
    city_name: str | None = Field(default=None, alias="cityName")
    start: datetime = Field(alias="startTime")
    end: datetime = Field(alias="endTime")
    capacity: int = 0
    booked_count: int = Field(default=0, alias="bookedCount")

    @property
    def availability(self) -> SlotAvailability:
        return calculate_availability(self.capacity, self.booked_count)


@dataclass(frozen=True)
class SlotMatch:
    """One ranked candidate with its score breakdown."""

    slot: SlotCandidate
    score: float
    place_score: float
    time_score: float
    date_score: float


@dataclass(frozen=True)
class SlotMatchResult:
    """Ranked candidates retained for one matching call.

    More than one entry means the best candidates were near-tied and the
    caller should let the user choose.
    """

    matches: tuple[SlotMatch, ...] = ()

    @property
    def slots(self) -> list[SlotCandidate]:
        return [match.slot for match in self.matches]

    def found(self) -> bool:
        return len(self.matches) > 0

    def best(self) -> SlotCandidate | None:
        return self.matches[0].slot if self.matches else None

    def is_ambiguous(self) -> bool:
        return len(self.matches) > 1
