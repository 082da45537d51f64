from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.cell import coordinate_from_string

from sheet_table.sheet.memory import EMPTY, InMemorySheet

"""Load / save one worksheet of an .xlsx workbook as an InMemorySheet.

Values are read with pandas (no header inference; the Table decides which row
is the header). Frozen rows are not visible through pandas, so they are taken
from the worksheet's freeze panes via openpyxl.
"""

__all__ = [
    "WorkbookError",
    "read_frozen_rows",
    "load_sheet",
    "save_sheet",
]


class WorkbookError(Exception):
    """Raised when the workbook file or the requested worksheet is missing."""


def read_frozen_rows(path: Path, sheet_name: str) -> int:
    """Number of rows above the worksheet's freeze pane split (0 if none)."""
    wb = load_workbook(path)
    try:
        if sheet_name not in wb.sheetnames:
            raise WorkbookError(f"sheet '{sheet_name}' not found in {path.name}")
        panes = wb[sheet_name].freeze_panes
    finally:
        wb.close()
    if not panes:
        return 0
    _, row = coordinate_from_string(panes)
    return max(row - 1, 0)


def load_sheet(path: Path, sheet_name: str, frozen_rows: int | None = None) -> InMemorySheet:
    """Read ``sheet_name`` from ``path``.

    Parameters
    ----------
    path: .xlsx file path
    sheet_name: worksheet to read
    frozen_rows: explicit override; None reads the freeze panes
    """
    if not path.exists():
        raise WorkbookError(f"workbook not found: {path}")
    with pd.ExcelFile(path) as xls:
        if sheet_name not in [str(n) for n in xls.sheet_names]:
            raise WorkbookError(f"sheet '{sheet_name}' not found in {path.name}")
        # dtype=object keeps ints from turning into floats in columns with blank cells
        df = xls.parse(sheet_name, header=None, dtype=object)
    df = df.astype(object).where(pd.notna(df), EMPTY)
    rows = df.values.tolist()
    if frozen_rows is None:
        frozen_rows = read_frozen_rows(path, sheet_name)
    return InMemorySheet(rows, frozen_rows=frozen_rows)


def save_sheet(sheet: InMemorySheet, path: Path, sheet_name: str) -> Path:
    """Write the sheet grid to ``path``; other worksheets of an existing workbook are kept."""
    df = pd.DataFrame(sheet.to_rows())
    frozen = sheet.get_frozen_rows()
    freeze_panes = (frozen, 0) if frozen > 0 else None
    if path.exists():
        writer = pd.ExcelWriter(path, engine="openpyxl", mode="a", if_sheet_exists="replace")
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = pd.ExcelWriter(path, engine="openpyxl", mode="w")
    with writer:
        df.to_excel(writer, sheet_name=sheet_name, header=False, index=False, freeze_panes=freeze_panes)
    return path
