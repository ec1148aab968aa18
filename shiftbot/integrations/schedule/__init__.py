"""Scheduling backend integration."""

from shiftbot.integrations.schedule.client import ScheduleApiClient

__all__ = ["ScheduleApiClient"]
