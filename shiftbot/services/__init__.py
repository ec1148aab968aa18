"""Application services."""

from shiftbot.services.shift_request_service import ShiftRequestService, ShiftResolution

__all__ = ["ShiftRequestService", "ShiftResolution"]
