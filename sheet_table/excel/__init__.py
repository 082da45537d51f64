"""Workbook (.xlsx) persistence for InMemorySheet."""

from .workbook import WorkbookError, load_sheet, save_sheet

__all__ = [
    "WorkbookError",
    "load_sheet",
    "save_sheet",
]
