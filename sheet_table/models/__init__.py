"""Domain models for sheet_table.

Records, typed row outcomes, diagnostic error records and table settings.
"""

from .config_models import TableConfig
from .error_record import ErrorRecord
from .outcome import OutcomeStatus, RecordBatch, RowOutcome
from .record import ROW_INDEX_KEY, Record

__all__ = [
    # Settings
    "TableConfig",
    # Row level
    "ROW_INDEX_KEY",
    "Record",
    "RecordBatch",
    "RowOutcome",
    "OutcomeStatus",
    # Diagnostics
    "ErrorRecord",
]
