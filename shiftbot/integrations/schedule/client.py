"""Scheduling backend REST client.

Read-only view of the slot endpoints:
- GET /api/group/slots?date=YYYY-MM-DD
- GET /api/group/slots/upcoming

Failures never escape this client: transport errors, HTTP errors and payloads
that do not validate are logged and reported as an empty list.
"""

from __future__ import annotations

from datetime import date

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from shiftbot.config.settings import settings
from shiftbot.matching.types import SlotCandidate

_SLOT_LIST = TypeAdapter(list[SlotCandidate])


class ScheduleApiClient:
    """Thin httpx client for the scheduling backend; satisfies ScheduleLookup."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend root URL (defaults to settings.schedule_api_base_url)
            timeout: Request timeout in seconds (defaults to settings.schedule_api_timeout_seconds)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.base_url = (base_url or settings.schedule_api_base_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout or settings.schedule_api_timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> ScheduleApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_json(self, path: str, params: dict[str, str] | None = None) -> object | None:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Schedule API returned an error status",
                path=path,
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            logger.error("Schedule API request failed", path=path, error=str(e))
        except ValueError as e:
            logger.error("Schedule API returned invalid JSON", path=path, error=str(e))
        return None

    def _get_slots(self, path: str, params: dict[str, str] | None = None) -> list[SlotCandidate]:
        payload = self._get_json(path, params)
        if payload is None:
            return []

        try:
            slots = _SLOT_LIST.validate_python(payload)
        except ValidationError as e:
            logger.error("Schedule API returned malformed slots", path=path, errors=e.error_count())
            return []

        logger.debug("Loaded slots", path=path, count=len(slots))
        return slots

    def get_slots_for_date(self, day: date) -> list[SlotCandidate]:
        """Fetch all slots on a calendar day."""
        return self._get_slots("/api/group/slots", params={"date": day.isoformat()})

    def get_upcoming_slots(self) -> list[SlotCandidate]:
        """Fetch all upcoming slots."""
        return self._get_slots("/api/group/slots/upcoming")
