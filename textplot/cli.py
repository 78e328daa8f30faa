from __future__ import annotations

import argparse
import datetime as dt
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from textplot.adapters.normalize import pd
from textplot.api import bar_chart, print_chart
from textplot.errors import PlotDataError
from textplot.style import PlainStyle


LOGGER = logging.getLogger("textplot")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="textplot", description="Draw line, dot and bar charts in the terminal.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--no-color", action="store_true", help="Print without ANSI colors.")
    sub = parser.add_subparsers(dest="command", required=True)

    for kind in ("line", "dot"):
        chart = sub.add_parser(kind, help=f"Draw a {kind} chart from a JSON or CSV file.")
        chart.add_argument("path", type=Path)
        chart.add_argument("--x", required=True, help="Ordinal field (number or date).")
        chart.add_argument("--y", required=True, help="Numeric field.")
        chart.add_argument("--small-multiples", default=None, help="Draw one chart per value of this field.")
        chart.add_argument("--fixed-scales", action="store_true", help="Share one value range across small multiples.")
        chart.add_argument("--per-row", type=int, default=None, help="Small multiples per row.")
        chart.add_argument("--categories", default=None, help="Color one series per value of this field.")
        chart.add_argument("--width", type=int, default=None)
        chart.add_argument("--height", type=int, default=None)
        chart.add_argument("--title", default=None)
        chart.add_argument("--decimals", type=int, default=None, help="Decimals of the y labels.")
        chart.add_argument("--x-ticks", type=int, default=None, help="Number of x tick labels.")
        chart.add_argument("--parse-dates", action="store_true", help="Parse ISO strings in the x field as dates.")

    bars = sub.add_parser("bar", help="Draw a horizontal bar chart from a JSON or CSV file.")
    bars.add_argument("path", type=Path)
    bars.add_argument("--labels", required=True)
    bars.add_argument("--values", required=True)
    bars.add_argument("--width", type=int, default=None)
    bars.add_argument("--decimals", type=int, default=None)
    bars.add_argument("--total-label", default=None)
    bars.add_argument("--compact", action="store_true")
    return parser.parse_args(argv)


def load_records(path: Path) -> list[dict[str, Any]]:
    if path.suffix.lower() == ".csv":
        if pd is None:
            raise PlotDataError("pandas is required to read CSV files")
        return pd.read_csv(path).to_dict("records")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise PlotDataError(f"{path}: expected a JSON array of objects")
    return payload


def parse_dates(records: list[dict[str, Any]], key: str) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for i, record in enumerate(records):
        value = record.get(key)
        if isinstance(value, str):
            try:
                value = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError as exc:
                raise PlotDataError(f'Row {i}: cannot parse "{key}" as a date: {value!r}') from exc
        out.append({**record, key: value})
    return out


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    style = PlainStyle() if args.no_color else None
    try:
        records = load_records(args.path)
        if args.command == "bar":
            bar_chart(
                records,
                args.labels,
                args.values,
                style=style,
                width=args.width,
                decimals=args.decimals,
                total_label=args.total_label,
                compact=args.compact,
            )
            return 0
        if args.parse_dates:
            records = parse_dates(records, args.x)
        print_chart(
            args.command,
            records,
            args.x,
            args.y,
            style=style,
            small_multiples=args.small_multiples,
            fixed_scales=args.fixed_scales,
            small_multiples_per_row=args.per_row,
            categories=args.categories,
            width=args.width,
            height=args.height,
            title=args.title,
            decimals=args.decimals,
            x_tick_count=args.x_ticks,
        )
    except (ValueError, OSError) as exc:
        LOGGER.debug("render failed", exc_info=True)
        print(f"textplot: {exc}", file=sys.stderr)
        return 2
    return 0
