from __future__ import annotations

from pathlib import Path

import pytest

from sheet_table.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    load_config,
    resolve_config_path,
)


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.workbook == "./data/people.xlsx"
    assert cfg.sheet == "People"
    assert cfg.frozen_rows is None
    assert cfg.error_log_dir == "./logs"
    assert cfg.table.missing_value == ""
    assert cfg.table.legacy_column_lookup is False


def test_load_config_optional_keys(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "frozen_rows: 2\nlegacy_column_lookup: true\n"
    text = text.replace('missing_value: ""', "missing_value: n/a")
    write_config.write_text(text, encoding="utf-8")
    cfg = load_config(write_config)
    assert cfg.frozen_rows == 2
    assert cfg.table.legacy_column_lookup is True
    assert cfg.table.missing_value == "n/a"


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("workbook: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(write_config)


def test_load_config_missing_required(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("sheet: People\n", "")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value) and "required property" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "extra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_negative_frozen_rows(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "frozen_rows: -1\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_empty_file(write_config: Path):
    write_config.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_workbook_env_override(write_config: Path, monkeypatch):
    monkeypatch.setenv("SHEET_TABLE_WORKBOOK", "/elsewhere/book.xlsx")
    assert load_config(write_config).workbook == "/elsewhere/book.xlsx"


def test_resolve_config_path_precedence(monkeypatch):
    monkeypatch.delenv("SHEET_TABLE_CONFIG", raising=False)
    assert resolve_config_path() == DEFAULT_CONFIG_PATH
    monkeypatch.setenv("SHEET_TABLE_CONFIG", "env.yml")
    assert resolve_config_path() == Path("env.yml")
    assert resolve_config_path("flag.yml") == Path("flag.yml")
