"""Parser output types and contracts."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict


class ParsedShiftRequest(BaseModel):
    """Structured intent extracted from one chat message.

    Invariants (enforced by the parser, not the model):
    - at least one of date, start_time, end_time is present
    - without any location token in the message, user_full_name is present
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    place_text: str | None = None
    user_full_name: str | None = None

    @property
    def has_time(self) -> bool:
        return self.start_time is not None or self.end_time is not None

    @property
    def has_temporal_anchor(self) -> bool:
        return self.date is not None or self.has_time
