from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for diagnostic logging.

One ErrorRecord per skipped row or rejected operation, serialized as a JSON
Lines entry with a fixed key set. row=-1 is allowed for sheet-level entries
where no specific row applies.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured diagnostic entry.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        sheet: Sheet name the table is bound to ("" when unknown)
        row: Row number (1-based). Use -1 when the row is unknown
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Description of the anomaly
    """
    timestamp: str  # ISO8601 UTC
    sheet: str
    row: int
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(sheet: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            sheet=sheet,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # dataclass -> dict, so no extra keys can appear
        return json.dumps(asdict(self), ensure_ascii=False, default=str)
