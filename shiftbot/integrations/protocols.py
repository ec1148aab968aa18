"""Contracts for the collaborators the engine consumes.

The engine never talks to the scheduling backend or the place catalog
itself; callers hand it objects satisfying these protocols.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from shiftbot.matching.types import SlotCandidate


class CatalogPlace(BaseModel):
    """Visible place from the place catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    city_name: str | None = Field(default=None, alias="cityName")


class PlaceCatalog(Protocol):
    """Source of visible place and city names for the stop-word index."""

    def list_visible_places(self) -> list[CatalogPlace]: ...

    def list_visible_cities(self) -> list[str]: ...


class ScheduleLookup(Protocol):
    """Source of candidate slots for matching.

    Implementations return an empty list rather than raising or returning None.
    """

    def get_slots_for_date(self, day: date) -> list[SlotCandidate]: ...

    def get_upcoming_slots(self) -> list[SlotCandidate]: ...
