from __future__ import annotations

import logging
from io import StringIO

from sheet_table.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1


def test_reset_logging_rebinds_handler():
    first = setup_logging()
    reset_logging()
    second = setup_logging()
    assert first is second  # same named logger
    assert len(second.handlers) == 1


def test_logging_labeled_prefixes():
    captured_output = StringIO()
    logger = logging.getLogger("test_sheet_table_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_get_logger_and_log_summary_to_stdout(capsys):
    assert get_logger() is setup_logging()
    log_summary("op=list rows=0 success=0 skipped=0 failed=0")
    out = capsys.readouterr().out
    assert "SUMMARY op=list rows=0 success=0 skipped=0 failed=0" in out


def test_table_warnings_use_labeled_logger(capsys, people_sheet):
    from sheet_table.services.table import Table

    table = Table(people_sheet)
    table.delete_records(people_sheet.get_range(1, 1, 1, 1))
    out = capsys.readouterr().out
    assert "WARN row 1 (height 1) not in record range" in out
