"""Header-keyed record access over a single spreadsheet sheet."""

from .models.config_models import TableConfig
from .models.outcome import OutcomeStatus, RecordBatch, RowOutcome
from .models.record import Record
from .services.table import EmptySheetError, Table, TableError
from .sheet.memory import InMemoryRange, InMemorySheet
from .sheet.protocol import InvalidRangeError, Range, Sheet

__all__ = [
    "EmptySheetError",
    "InMemoryRange",
    "InMemorySheet",
    "InvalidRangeError",
    "OutcomeStatus",
    "Range",
    "Record",
    "RecordBatch",
    "RowOutcome",
    "Sheet",
    "Table",
    "TableConfig",
    "TableError",
]
