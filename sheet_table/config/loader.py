from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from sheet_table.models.config_models import TableConfig

"""Config loader.

Responsibilities:
- Load YAML (default config/table.yml, or $SHEET_TABLE_CONFIG)
- Validate against the packaged table_config_schema.json
- Apply defaults and the $SHEET_TABLE_WORKBOOK override
"""

__all__ = [
    "AppConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
    "resolve_config_path",
]

SCHEMA_PATH = Path(__file__).parent / "table_config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/table.yml")

ENV_CONFIG = "SHEET_TABLE_CONFIG"
ENV_WORKBOOK = "SHEET_TABLE_WORKBOOK"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class AppConfig:
    workbook: str
    sheet: str
    frozen_rows: int | None  # None -> taken from the workbook freeze panes
    error_log_dir: str
    table: TableConfig


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing/unreadable, or data failing validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    """--config flag > $SHEET_TABLE_CONFIG > config/table.yml"""
    if explicit is not None:
        return Path(explicit)
    env = os.getenv(ENV_CONFIG)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    table = TableConfig(
        missing_value=data.get("missing_value", ""),
        legacy_column_lookup=data.get("legacy_column_lookup", False),
    )
    return AppConfig(
        workbook=os.getenv(ENV_WORKBOOK) or data["workbook"],
        sheet=data["sheet"],
        frozen_rows=data.get("frozen_rows"),
        error_log_dir=data.get("error_log_dir", "./logs"),
        table=table,
    )
