from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from sheet_table.logging.error_log import ErrorLogBuffer
from sheet_table.logging.init import get_logger
from sheet_table.models.config_models import TableConfig
from sheet_table.models.error_record import ErrorRecord
from sheet_table.models.outcome import (
    EMPTY_RECORD,
    OUT_OF_RECORD_RANGE,
    ROW_LENGTH_MISMATCH,
    RecordBatch,
    RowOutcome,
)
from sheet_table.models.record import Record
from sheet_table.sheet.protocol import Range, Sheet

"""Header-keyed record access over one sheet.

The header row is the last frozen row (row 1 when nothing is frozen); every
row below it is a record. Headers are cached at construction and only
re-read through refresh_headers().

Anomalies never raise from the row operations. A malformed row is skipped,
an out-of-range delete is a no-op and an all-blank record is not appended;
each is logged as WARN, appended to the optional ErrorLogBuffer and reported
back as a RowOutcome carrying the same message.
"""

__all__ = [
    "EmptySheetError",
    "Table",
    "TableError",
]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class TableError(Exception):
    pass


class EmptySheetError(TableError):
    """Raised when the bound sheet has no columns, so no header row exists."""


class Table:
    def __init__(
        self,
        sheet: Sheet,
        config: TableConfig | None = None,
        error_log: ErrorLogBuffer | None = None,
        sheet_name: str = "",
    ) -> None:
        self.sheet = sheet
        self.config = config or TableConfig()
        self.error_log = error_log
        self.sheet_name = sheet_name
        self._logger = get_logger()
        self._headers: tuple[Any, ...] = self._read_headers()

    # --- headers --------------------------------------------------------

    @property
    def headers(self) -> tuple[Any, ...]:
        return self._headers

    def _header_row(self) -> int:
        frozen = self.sheet.get_frozen_rows()
        return frozen if frozen > 0 else 1

    def _read_headers(self) -> tuple[Any, ...]:
        last_column = self.sheet.get_last_column()
        if last_column < 1:
            raise EmptySheetError(f"sheet '{self.sheet_name}' has no columns; header row missing")
        values = self.sheet.get_range(self._header_row(), 1, 1, last_column).get_values()
        return tuple(values[0])

    def refresh_headers(self) -> tuple[Any, ...]:
        """Re-read the header row (the cached copy goes stale on out-of-band edits)."""
        self._headers = self._read_headers()
        self._logger.debug(f"headers refreshed: {list(self._headers)}")
        return self._headers

    def get_column_for_header(self, name: str) -> int | None:
        """1-based column of ``name`` in the cached header row, None when absent."""
        try:
            index = self._headers.index(name)
        except ValueError:
            return None
        if self.config.legacy_column_lookup and index == 0:
            return None
        return index + 1

    # --- range helpers ----------------------------------------------------

    def first_record_index(self) -> int:
        return self._header_row() + 1

    def within_record_range(self, range_: Range) -> bool:
        row = range_.get_row()
        last = row + range_.get_height() - 1
        return row >= self.first_record_index() and last <= self.sheet.get_last_row()

    def convert_range_to_row_range(self, range_: Range) -> Range:
        """Full-width range over the same rows, start clamped below the header."""
        start_row = max(range_.get_row(), self.first_record_index())
        return self.sheet.get_range(start_row, 1, range_.get_height(), self.sheet.get_last_column())

    def get_range_for_rows(self, row_index: int, num_rows: int) -> Range:
        # no clamping: header protection is up to the caller
        return self.sheet.get_range(row_index, 1, num_rows, self.sheet.get_last_column())

    # --- reading --------------------------------------------------------

    def _build_record(self, raw_row: Sequence[Any] | None, row_index: int) -> Record | RowOutcome:
        if raw_row is None or len(raw_row) != len(self._headers):
            got = "None" if raw_row is None else len(raw_row)
            return self._report(
                row_index,
                ROW_LENGTH_MISMATCH,
                f"row {row_index}: expected {len(self._headers)} values, got {got}",
            )
        values = {key: value for key, value in zip(self._headers, raw_row) if key != ""}
        return Record(row_index=row_index, values=values)

    def make_record(self, raw_row: Sequence[Any] | None, row_index: int) -> Record | None:
        built = self._build_record(raw_row, row_index)
        return built if isinstance(built, Record) else None

    def read_records(self, range_: Range) -> RecordBatch:
        row_range = self.convert_range_to_row_range(range_)
        # rowIndex comes from the clamped range that was actually read
        start_row = row_range.get_row()
        batch = RecordBatch()
        for offset, raw in enumerate(row_range.get_values()):
            row_index = start_row + offset
            built = self._build_record(raw, row_index)
            if isinstance(built, RowOutcome):
                batch.outcomes.append(built)
                continue
            batch.records.append(built)
            batch.outcomes.append(RowOutcome.success(row_index))
        return batch

    def get_records(self, range_: Range) -> list[Record]:
        return self.read_records(range_).records

    def read_all_records(self) -> RecordBatch:
        first = self.first_record_index()
        last = self.sheet.get_last_row()
        if last < first:
            return RecordBatch()
        return self.read_records(self.sheet.get_range(first, 1, last - first + 1, self.sheet.get_last_column()))

    def get_all_records(self) -> list[Record]:
        return self.read_all_records().records

    # --- writing --------------------------------------------------------

    def _project(self, record: Mapping[str, Any] | Record) -> list[Any]:
        values = record.values if isinstance(record, Record) else record
        missing = self.config.missing_value
        row = []
        for header in self._headers:
            value = values.get(header) if header != "" else None
            row.append(missing if value is None else value)
        return row

    def add_records(self, records: Iterable[Mapping[str, Any] | Record]) -> list[RowOutcome]:
        """Append one row per record, in input order.

        A record that projects to an all-blank row is skipped (EMPTY_RECORD):
        a blank row does not move the sheet's last row, so the next append
        would land on top of it.
        """
        outcomes = []
        for position, record in enumerate(records):
            row = self._project(record)
            target = self.sheet.get_last_row() + 1
            if all(_is_blank(v) for v in row):
                outcomes.append(
                    self._report(target, EMPTY_RECORD, f"record #{position}: no values for any header, not appended")
                )
                continue
            self.sheet.append_row(row)
            outcomes.append(RowOutcome.success(target))
        self._logger.debug(f"appended {sum(o.ok for o in outcomes)} record(s)")
        return outcomes

    def delete_records(self, range_: Range) -> RowOutcome:
        row = range_.get_row()
        if not self.within_record_range(range_):
            return self._report(
                row,
                OUT_OF_RECORD_RANGE,
                f"row {row} (height {range_.get_height()}) not in record range",
            )
        self.sheet.delete_rows(row, range_.get_height())
        self._logger.debug(f"deleted rows {row}..{row + range_.get_height() - 1}")
        return RowOutcome.success(row)

    def update_record(self, row_index: int, record: Mapping[str, Any] | Record) -> RowOutcome:
        """Overwrite exactly one row with the record projected onto the headers."""
        row = self._project(record)
        self.sheet.get_range(row_index, 1, 1, len(row)).set_values([row])
        return RowOutcome.success(row_index)

    # --- diagnostics ------------------------------------------------------

    def _report(self, row: int, error_type: str, message: str) -> RowOutcome:
        self._logger.warning(message)
        if self.error_log is not None:
            self.error_log.append(ErrorRecord.create(self.sheet_name, row, error_type, message))
        return RowOutcome.skipped(row, error_type, message)
