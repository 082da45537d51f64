from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .record import Record

"""Typed per-row results for table operations.

Every anomaly the table recovers from (malformed row, out-of-range delete)
is reported as a RowOutcome instead of only a log line, so callers and tests
can tell "nothing to do" apart from "guard failed".
"""

__all__ = [
    "OutcomeStatus",
    "RowOutcome",
    "RecordBatch",
    "ROW_LENGTH_MISMATCH",
    "OUT_OF_RECORD_RANGE",
    "EMPTY_RECORD",
]

# error_type values (UPPER_SNAKE)
ROW_LENGTH_MISMATCH = "ROW_LENGTH_MISMATCH"
OUT_OF_RECORD_RANGE = "OUT_OF_RECORD_RANGE"
EMPTY_RECORD = "EMPTY_RECORD"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class RowOutcome:
    """Result of one row-level operation.

    Attributes:
        row: Absolute sheet row the outcome refers to (start row for blocks)
        status: success / skipped / failed
        error_type: UPPER_SNAKE classification, None on success
        message: Human readable detail, None on success
    """
    row: int
    status: OutcomeStatus
    error_type: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @staticmethod
    def success(row: int) -> RowOutcome:
        return RowOutcome(row=row, status=OutcomeStatus.SUCCESS)

    @staticmethod
    def skipped(row: int, error_type: str, message: str) -> RowOutcome:
        return RowOutcome(row=row, status=OutcomeStatus.SKIPPED, error_type=error_type, message=message)


@dataclass(frozen=True)
class RecordBatch:
    """Records built from a read plus one outcome per raw row read."""
    records: list[Record] = field(default_factory=list)
    outcomes: list[RowOutcome] = field(default_factory=list)

    @property
    def skipped(self) -> list[RowOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.SKIPPED]
