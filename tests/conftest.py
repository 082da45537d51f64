# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from sheet_table.excel.workbook import save_sheet
from sheet_table.logging.init import reset_logging
from sheet_table.sheet.memory import InMemorySheet


@pytest.fixture(autouse=True)
def _fresh_logger():
    # rebind the logger StreamHandler to the stdout capsys installs
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SHEET_TABLE_CONFIG", raising=False)
        monkeypatch.delenv("SHEET_TABLE_WORKBOOK", raising=False)
        yield p


@pytest.fixture()
def people_rows() -> list[list[object]]:
    return [
        ["id", "name", "team"],
        [1, "Alice", "red"],
        [2, "Bob", "blue"],
        [3, "Carol", "red"],
    ]


@pytest.fixture()
def people_sheet(people_rows) -> InMemorySheet:
    return InMemorySheet(people_rows, frozen_rows=1)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """workbook: ./data/people.xlsx
sheet: People
missing_value: ""
error_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "table.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def people_workbook(temp_workdir: Path, people_rows) -> Path:
    path = temp_workdir / "data" / "people.xlsx"
    save_sheet(InMemorySheet(people_rows, frozen_rows=1), path, "People")
    return path
