from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

"""Collaborator contracts consumed by Table.

Any spreadsheet backend (a hosted service client, a workbook loaded in
memory, a test double) can be bound to a Table as long as it provides these
range primitives. All coordinates are 1-based, matching spreadsheet UIs.
"""

__all__ = [
    "InvalidRangeError",
    "Range",
    "Sheet",
]


class InvalidRangeError(ValueError):
    """Raised when range coordinates/dimensions are invalid or a value grid does not fit."""


@runtime_checkable
class Range(Protocol):
    def get_row(self) -> int: ...

    def get_column(self) -> int: ...

    def get_height(self) -> int: ...

    def get_width(self) -> int: ...

    def get_values(self) -> list[list[Any]]: ...

    def set_values(self, values: Sequence[Sequence[Any]]) -> None: ...


@runtime_checkable
class Sheet(Protocol):
    def get_frozen_rows(self) -> int: ...

    def get_last_row(self) -> int: ...

    def get_last_column(self) -> int: ...

    def get_range(self, row: int, column: int, num_rows: int, num_columns: int) -> Range: ...

    def append_row(self, values: Sequence[Any]) -> None: ...

    def delete_rows(self, row: int, num_rows: int) -> None: ...
