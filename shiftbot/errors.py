"""Canonical error types for the shift-request engine.

Heuristic misses (no date, no match, ambiguous match) are never errors; the
engine reports them through empty return values. These types cover ambient
failures only.

Standard error codes:
- FILE_NOT_FOUND: Data file does not exist
- INVALID_JSON: Data file is not valid JSON
- INVALID_SLOTS: Slot feed does not match the slot schema
- INVALID_CATALOG: Place catalog does not match the catalog schema
"""


class ShiftbotError(RuntimeError):
    """Base error with a machine-readable code.

    Attributes:
        code: Error code (e.g., "INVALID_JSON", "INVALID_SLOTS")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class DataFileError(ShiftbotError):
    """Raised when a slot feed or place catalog file cannot be loaded."""
