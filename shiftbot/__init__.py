"""Shift request interpretation and slot matching."""

__version__ = "0.1.0"
