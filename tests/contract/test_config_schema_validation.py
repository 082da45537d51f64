from __future__ import annotations

import json

import jsonschema
import pytest
import yaml

from sheet_table.config.loader import SCHEMA_PATH

"""Config JSON schema contract (config/table.yml)."""


@pytest.fixture()
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_sample_config_valid(schema, sample_config_yaml):
    jsonschema.validate(yaml.safe_load(sample_config_yaml), schema)


def test_full_config_valid(schema):
    data = {
        "workbook": "./data/book.xlsx",
        "sheet": "Sheet1",
        "frozen_rows": 0,
        "missing_value": "",
        "legacy_column_lookup": False,
        "error_log_dir": "./logs",
    }
    jsonschema.validate(data, schema)


@pytest.mark.parametrize(
    "patch",
    [
        {"workbook": ""},
        {"sheet": 3},
        {"frozen_rows": "1"},
        {"legacy_column_lookup": "yes"},
        {"missing_value": None},
        {"unknown": 1},
    ],
)
def test_invalid_values_rejected(schema, patch):
    data = {"workbook": "./data/book.xlsx", "sheet": "Sheet1"}
    data.update(patch)
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(data, schema)
