from __future__ import annotations

from collections.abc import Iterator, KeysView
from dataclasses import dataclass, field
from typing import Any

"""Record model for sheet_table.

A Record is the header-keyed view of one data row plus the absolute
(1-based) sheet row it was read from. Records are transient: they carry no
identity beyond ``row_index`` and writes go straight back to the sheet.
"""

__all__ = [
    "ROW_INDEX_KEY",
    "Record",
]

# Synthetic key used when a record is flattened to a plain dict
ROW_INDEX_KEY = "rowIndex"


@dataclass(frozen=True)
class Record:
    """Header-keyed values of a single sheet row.

    Empty-string headers never appear in ``values``; the cell still exists in
    the backing row but has no key here.
    """
    row_index: int  # Absolute sheet row (header row + 1 = first record)
    values: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def keys(self) -> KeysView[str]:
        return self.values.keys()

    def as_dict(self) -> dict[str, Any]:
        """Flatten to a plain dict with the synthetic ``rowIndex`` key first."""
        flat: dict[str, Any] = {ROW_INDEX_KEY: self.row_index}
        flat.update(self.values)
        return flat
