"""CLI entry point for ranking marks with the selection sort core."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any

from config import settings
from domain.errors import ReportError
from ranking import (
    get_sorting_stats,
    sort_numeric_array,
    sort_students_with_grades,
    sort_table_data,
)

_log = logging.getLogger(__name__)


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _read_records(path: str) -> list[Any]:
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, list):
        raise ReportError("Input must be a JSON array of records", context={"path": path})
    return data


def cmd_sort_numbers(args: argparse.Namespace) -> None:
    values = args.values
    result = sort_numeric_array(values, ascending=not args.desc)
    payload: dict[str, Any] = {"sorted": result}
    if args.stats:
        payload["stats"] = get_sorting_stats(values, result).as_dict()
    _emit(payload)


def cmd_rank(args: argparse.Namespace) -> None:
    records = _read_records(args.input)
    ascending = not args.desc
    reordered = sort_table_data(records, args.field, ascending=ascending)
    result = reordered
    if args.grades:
        # graded rows are copies sorted on the same keys, so the permutation matches
        result = sort_students_with_grades(records, ascending=ascending, score_field=args.field)
    _log.info("ranked %d records by %s", len(result), args.field)
    payload: dict[str, Any] = {"sorted": result}
    if args.stats:
        payload["stats"] = get_sorting_stats(records, reordered).as_dict()
    _emit(payload)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="report-core")
    p.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=settings.LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    numbers = sub.add_parser("sort-numbers", help="Selection sort a list of numbers")
    numbers.add_argument("values", nargs="*", type=float, help="Numbers to sort")
    numbers.add_argument("--desc", action="store_true", help="Sort descending")
    numbers.add_argument("--stats", action="store_true", help="Include sorting statistics")
    numbers.set_defaults(func=cmd_sort_numbers)

    rank = sub.add_parser("rank", help="Sort a JSON array of records by a field")
    rank.add_argument("input", help="Path to a JSON array of records, '-' for stdin")
    rank.add_argument("--field", default=settings.DEFAULT_SORT_FIELD, help="Dotted field path")
    rank.add_argument("--desc", action="store_true", help="Sort descending")
    rank.add_argument("--grades", action="store_true", help="Attach letter grades")
    rank.add_argument("--stats", action="store_true", help="Include sorting statistics")
    rank.set_defaults(func=cmd_rank)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)
    try:
        args.func(args)
    except ReportError as exc:
        where = f" [{exc.sheet}]" if exc.sheet else ""
        print(f"error: {exc}{where}", file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
