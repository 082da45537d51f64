from __future__ import annotations

import re

from sheet_table.models.outcome import OutcomeStatus, RowOutcome
from sheet_table.services.summary import count_outcomes, render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+op=([a-z]+)\s+rows=([0-9]+)\s+success=([0-9]+)\s+"
    r"skipped=([0-9]+)\s+failed=([0-9]+)$"
)


def test_render_summary_line_mixed():
    outcomes = [
        RowOutcome.success(2),
        RowOutcome.success(3),
        RowOutcome.skipped(4, "ROW_LENGTH_MISMATCH", "short"),
        RowOutcome(row=5, status=OutcomeStatus.FAILED, error_type="X", message="y"),
    ]
    line = render_summary_line("list", outcomes)
    m = SUMMARY_PATTERN.match(line)
    assert m, line
    assert m.groups() == ("list", "4", "2", "1", "1")


def test_render_summary_line_empty():
    assert render_summary_line("add", []) == "SUMMARY op=add rows=0 success=0 skipped=0 failed=0"


def test_render_summary_line_accepts_generator():
    line = render_summary_line("delete", (RowOutcome.success(r) for r in range(2, 5)))
    assert line == "SUMMARY op=delete rows=3 success=3 skipped=0 failed=0"


def test_count_outcomes_has_every_status():
    counts = count_outcomes([])
    assert set(counts) == set(OutcomeStatus)
    assert all(v == 0 for v in counts.values())
