"""JSON file backed place catalog and slot feed.

Used by the CLI and tests where no scheduling backend is available.

Catalog file:
    {"cities": ["Вінниця"], "places": [{"name": "Стрижавка", "cityName": "Вінниця"}]}

Slot file: a list of slots in the backend's camelCase shape.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from shiftbot.errors import DataFileError
from shiftbot.integrations.protocols import CatalogPlace
from shiftbot.matching.types import SlotCandidate

_SLOT_LIST = TypeAdapter(list[SlotCandidate])


class CatalogFile(BaseModel):
    """On-disk shape of a place catalog."""

    cities: list[str] = Field(default_factory=list)
    places: list[CatalogPlace] = Field(default_factory=list)


def _read_json(path: Path) -> object:
    if not path.is_file():
        raise DataFileError("FILE_NOT_FOUND", [str(path)])
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataFileError("INVALID_JSON", [f"{path}: {e}"]) from e


def _validation_details(error: ValidationError) -> list[str]:
    return [f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()]


class FilePlaceCatalog:
    """Place catalog read from a JSON file; satisfies PlaceCatalog."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        try:
            self._catalog = CatalogFile.model_validate(_read_json(self.path))
        except ValidationError as e:
            raise DataFileError("INVALID_CATALOG", _validation_details(e)) from e
        logger.debug(
            "Loaded place catalog",
            path=str(self.path),
            cities=len(self._catalog.cities),
            places=len(self._catalog.places),
        )

    def list_visible_places(self) -> list[CatalogPlace]:
        return list(self._catalog.places)

    def list_visible_cities(self) -> list[str]:
        return list(self._catalog.cities)


class FileScheduleLookup:
    """Slot feed read from a JSON file; satisfies ScheduleLookup."""

    def __init__(self, path: str | Path, today: date | None = None) -> None:
        """Load and validate the slot file.

        Args:
            path: JSON file holding a list of slots
            today: Reference day for get_upcoming_slots (defaults to date.today())

        Raises:
            DataFileError: If the file is missing, not JSON, or not a slot list
        """
        self.path = Path(path)
        self.today = today
        try:
            self._slots = _SLOT_LIST.validate_python(_read_json(self.path))
        except ValidationError as e:
            raise DataFileError("INVALID_SLOTS", _validation_details(e)) from e
        logger.debug("Loaded slot feed", path=str(self.path), count=len(self._slots))

    def get_slots_for_date(self, day: date) -> list[SlotCandidate]:
        return [slot for slot in self._slots if slot.start.date() == day]

    def get_upcoming_slots(self) -> list[SlotCandidate]:
        reference = self.today or date.today()
        return [slot for slot in self._slots if slot.start.date() >= reference]
