from __future__ import annotations

from dataclasses import dataclass
from typing import Any

"""Config dataclasses for sheet_table.

TableConfig holds the per-table behaviour switches. The file-level settings
(workbook path, sheet name, log directory) live in config.loader.AppConfig.
"""

__all__ = [
    "TableConfig",
]


@dataclass(frozen=True)
class TableConfig:
    """Behaviour switches for a Table instance.

    missing_value is written for any header the record does not carry (or
    carries as None), for both appends and updates.
    """
    missing_value: Any = ""
    # True: keep the historical lookup that never matches the first column
    legacy_column_lookup: bool = False
