from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .protocol import InvalidRangeError

"""In-memory sheet backed by a list of rows.

Used by the workbook CLI (load -> operate -> save) and as the test double for
Table. Behaviour follows hosted spreadsheet services:

- last row / last column = last position holding a non-empty value
- reads outside the stored grid are padded with ""
- writes outside the stored grid grow it
- set_values must match the range shape exactly
"""

__all__ = [
    "EMPTY",
    "InMemoryRange",
    "InMemorySheet",
]

EMPTY = ""


def _is_empty(value: Any) -> bool:
    return value is None or value == EMPTY


class InMemorySheet:
    """Rectangular-ish grid of cell values (rows may be ragged internally)."""

    def __init__(self, rows: Sequence[Sequence[Any]] | None = None, frozen_rows: int = 0) -> None:
        if frozen_rows < 0:
            raise ValueError(f"frozen_rows must be >= 0: {frozen_rows}")
        self._rows: list[list[Any]] = [list(r) for r in (rows or [])]
        self._frozen_rows = frozen_rows

    # --- sheet metadata -------------------------------------------------

    def get_frozen_rows(self) -> int:
        return self._frozen_rows

    def set_frozen_rows(self, frozen_rows: int) -> None:
        if frozen_rows < 0:
            raise ValueError(f"frozen_rows must be >= 0: {frozen_rows}")
        self._frozen_rows = frozen_rows

    def get_last_row(self) -> int:
        for idx in range(len(self._rows) - 1, -1, -1):
            if any(not _is_empty(v) for v in self._rows[idx]):
                return idx + 1
        return 0

    def get_last_column(self) -> int:
        last = 0
        for row in self._rows:
            for idx in range(len(row) - 1, last - 1, -1):
                if not _is_empty(row[idx]):
                    last = idx + 1
                    break
        return last

    # --- cell access ----------------------------------------------------

    def get_range(self, row: int, column: int, num_rows: int, num_columns: int) -> InMemoryRange:
        return InMemoryRange(self, row, column, num_rows, num_columns)

    def append_row(self, values: Sequence[Any]) -> None:
        target = self.get_last_row()
        # trailing blank rows are overwritten; the new row goes right after the last used row
        del self._rows[target:]
        self._rows.append(list(values))

    def delete_rows(self, row: int, num_rows: int) -> None:
        if row < 1 or num_rows < 1:
            raise InvalidRangeError(f"invalid row block: row={row} num_rows={num_rows}")
        del self._rows[row - 1 : row - 1 + num_rows]

    def to_rows(self) -> list[list[Any]]:
        """Copy of the stored grid trimmed to last row x last column, padded rectangular."""
        height = self.get_last_row()
        width = self.get_last_column()
        if height == 0 or width == 0:
            return []
        return self.get_range(1, 1, height, width).get_values()

    # --- internal helpers used by InMemoryRange -----------------------------

    def _read(self, row: int, column: int, num_rows: int, num_columns: int) -> list[list[Any]]:
        out: list[list[Any]] = []
        for r in range(row - 1, row - 1 + num_rows):
            src = self._rows[r] if r < len(self._rows) else []
            line = []
            for c in range(column - 1, column - 1 + num_columns):
                line.append(src[c] if c < len(src) else EMPTY)
            out.append(line)
        return out

    def _write(self, row: int, column: int, values: Sequence[Sequence[Any]]) -> None:
        for offset, line in enumerate(values):
            r = row - 1 + offset
            while len(self._rows) <= r:
                self._rows.append([])
            target = self._rows[r]
            needed = column - 1 + len(line)
            if len(target) < needed:
                target.extend([EMPTY] * (needed - len(target)))
            for c, value in enumerate(line):
                target[column - 1 + c] = value

    def __repr__(self) -> str:  # pragma: no cover
        return f"InMemorySheet(rows={self.get_last_row()}, columns={self.get_last_column()}, frozen={self._frozen_rows})"


class InMemoryRange:
    """A (row, column, height, width) selector over an InMemorySheet."""

    def __init__(self, sheet: InMemorySheet, row: int, column: int, num_rows: int, num_columns: int) -> None:
        if row < 1 or column < 1 or num_rows < 1 or num_columns < 1:
            raise InvalidRangeError(
                f"the coordinates or dimensions of the range are invalid: "
                f"row={row} column={column} num_rows={num_rows} num_columns={num_columns}"
            )
        self._sheet = sheet
        self._row = row
        self._column = column
        self._height = num_rows
        self._width = num_columns

    def get_row(self) -> int:
        return self._row

    def get_column(self) -> int:
        return self._column

    def get_height(self) -> int:
        return self._height

    def get_width(self) -> int:
        return self._width

    def get_values(self) -> list[list[Any]]:
        return self._sheet._read(self._row, self._column, self._height, self._width)

    def set_values(self, values: Sequence[Sequence[Any]]) -> None:
        if len(values) != self._height or any(len(line) != self._width for line in values):
            raise InvalidRangeError(
                f"value grid does not match range {self._height}x{self._width}"
            )
        self._sheet._write(self._row, self._column, values)

    def __repr__(self) -> str:  # pragma: no cover
        return f"InMemoryRange(row={self._row}, column={self._column}, height={self._height}, width={self._width})"
