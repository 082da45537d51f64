from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from sheet_table.config.loader import AppConfig, ConfigError, load_config, resolve_config_path
from sheet_table.excel.workbook import WorkbookError, load_sheet, save_sheet
from sheet_table.logging.error_log import ErrorLogBuffer
from sheet_table.logging.init import log_summary, setup_logging
from sheet_table.models.outcome import RowOutcome
from sheet_table.services.summary import render_summary_line
from sheet_table.services.table import Table, TableError

"""CLI entrypoint.

Binds a Table to one worksheet of an .xlsx workbook and runs a single
operation:

- list                          print every record as a JSON line
- add FILE                      append records from a JSON array / JSON Lines file
- update --row N --record JSON  overwrite one row
- delete --row N [--count M]    delete a block of record rows

Mutating commands save the workbook afterwards. A SUMMARY line is always
logged on success paths.
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env via python-dotenv; existing environment wins unless override=True."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheet_table", description="Header-keyed record access to a worksheet")
    p.add_argument("--config", default=None, help="Config YAML (default: $SHEET_TABLE_CONFIG or config/table.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Print all records as JSON lines")

    add = sub.add_parser("add", help="Append records from a JSON file")
    add.add_argument("file", help="JSON array of objects, or JSON Lines")

    upd = sub.add_parser("update", help="Overwrite one record row")
    upd.add_argument("--row", type=int, required=True, help="Absolute sheet row (1-based)")
    upd.add_argument("--record", required=True, help="JSON object keyed by header name")

    dele = sub.add_parser("delete", help="Delete a block of record rows")
    dele.add_argument("--row", type=int, required=True, help="First row to delete (1-based)")
    dele.add_argument("--count", type=int, default=1, help="Number of rows (default 1)")
    return p.parse_args(argv)


def _read_records_file(path: Path) -> list[dict[str, Any]]:
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return []
    if text.startswith("["):
        data = json.loads(text)
    else:
        data = [json.loads(line) for line in text.splitlines() if line.strip()]
    if not all(isinstance(item, Mapping) for item in data):
        raise ValueError(f"{path}: every record must be a JSON object")
    return data


def _json_default(value: Any) -> Any:
    # datetime / Timestamp values are written as isoformat
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _run(cfg: AppConfig, args: argparse.Namespace, error_log: ErrorLogBuffer) -> list[RowOutcome]:
    workbook = Path(cfg.workbook)
    sheet = load_sheet(workbook, cfg.sheet, frozen_rows=cfg.frozen_rows)
    table = Table(sheet, config=cfg.table, error_log=error_log, sheet_name=cfg.sheet)

    if args.command == "list":
        batch = table.read_all_records()
        for record in batch.records:
            print(json.dumps(record.as_dict(), ensure_ascii=False, default=_json_default))
        return batch.outcomes

    if args.command == "add":
        outcomes = table.add_records(_read_records_file(Path(args.file)))
    elif args.command == "update":
        record = json.loads(args.record)
        if not isinstance(record, Mapping):
            raise ValueError("--record must be a JSON object")
        outcomes = [table.update_record(args.row, record)]
    else:
        outcomes = [table.delete_records(sheet.get_range(args.row, 1, args.count, 1))]

    if any(o.ok for o in outcomes):
        save_sheet(sheet, workbook, cfg.sheet)
    return outcomes


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # read sys.argv only for None so that main([]) does not pick up pytest arguments
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        for h in logger.handlers:
            h.setLevel("DEBUG")
        logger.setLevel("DEBUG")
        logger.debug("debug mode enabled")

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    error_log = ErrorLogBuffer(cfg.error_log_dir)
    try:
        outcomes = _run(cfg, args, error_log)
    except (WorkbookError, TableError, ValueError, OSError) as e:
        logger.error(f"{args.command}: {e}")
        return EXIT_FATAL
    finally:
        written = error_log.flush()
        if written is not None:
            logger.info(f"error log written: {written}")

    summary_line = render_summary_line(args.command, outcomes)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if any(not o.ok for o in outcomes):
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
