from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from sheet_table.models.error_record import ErrorRecord

"""Diagnostic sink for skipped rows and rejected operations.

- JSON Lines, fixed key set (no extra keys)
- one ``errors-YYYYMMDD-HHMMSS.log`` (UTC) per buffer, created on first flush
- records are buffered in memory and appended on flush()
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
    "SCHEMA_PATH",
]

DEFAULT_LOG_DIR = Path("./logs")
SCHEMA_PATH = Path(__file__).parent / "error_log_schema.json"
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """In-memory buffer of ErrorRecords; flush() appends them as JSON Lines.

    Serial use only (not thread safe).
    """

    def __init__(self, log_dir: Path | str | None = None) -> None:
        self._records: list[ErrorRecord] = []
        self._log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._log_dir / f"errors-{stamp}.log"
        return self._file_path

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._records)

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Write buffered records. Returns the file path, or None when nothing was buffered."""
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
