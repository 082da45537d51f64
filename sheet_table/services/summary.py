from __future__ import annotations

from collections.abc import Iterable

from ..models.outcome import OutcomeStatus, RowOutcome

"""Summary line rendering over per-row outcomes.

Format:
SUMMARY op={operation} rows={total} success={s} skipped={k} failed={f}
"""


def count_outcomes(outcomes: Iterable[RowOutcome]) -> dict[OutcomeStatus, int]:
    counts = {status: 0 for status in OutcomeStatus}
    for outcome in outcomes:
        counts[outcome.status] += 1
    return counts


def render_summary_line(operation: str, outcomes: Iterable[RowOutcome]) -> str:
    """Render a SUMMARY line for one table operation.

    Examples:
        >>> from sheet_table.models.outcome import RowOutcome
        >>> render_summary_line("list", [RowOutcome.success(2), RowOutcome.skipped(3, "ROW_LENGTH_MISMATCH", "x")])
        'SUMMARY op=list rows=2 success=1 skipped=1 failed=0'
    """
    counts = count_outcomes(outcomes)
    total = sum(counts.values())
    return (
        f"SUMMARY op={operation} "
        f"rows={total} "
        f"success={counts[OutcomeStatus.SUCCESS]} "
        f"skipped={counts[OutcomeStatus.SKIPPED]} "
        f"failed={counts[OutcomeStatus.FAILED]}"
    )
