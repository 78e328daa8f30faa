from __future__ import annotations

import logging
import sys
from typing import IO, Any

from textplot.adapters.normalize import normalize_records, sort_by_ordinal, validate_data_types
from textplot.bars import render_bar_chart
from textplot.colors import HEADLINE_COLOR, MUTED_COLOR
from textplot.config import BarConfig, ChartConfig
from textplot.context import RenderContext
from textplot.display import resolve_style, to_lines
from textplot.figure import Chart, render_single
from textplot.layout import render_small_multiples
from textplot.raster import recolor_text, renderer_for
from textplot.style import AnsiStyle, Style


LOGGER = logging.getLogger(__name__)


def build_chart(
    kind: str,
    data: Any,
    x_key: str,
    y_key: str,
    config: ChartConfig,
    ctx: RenderContext,
) -> Chart:
    renderer_for(kind)
    records = normalize_records(data)
    validate_data_types(records, x_key, y_key)
    records = sort_by_ordinal(records, x_key)
    if config.small_multiples is not None:
        chart = render_small_multiples(kind, records, x_key, y_key, config, ctx)
    else:
        chart = render_single(kind, records, x_key, y_key, config, ctx)
    recolor_text(chart.canvas, chart.x_labels, MUTED_COLOR)
    LOGGER.debug("rendered %s chart of %d records (%dx%d cells)", kind, len(records), chart.width, chart.height)
    return chart


def render_chart(
    kind: str,
    data: Any,
    x_key: str,
    y_key: str,
    *,
    context: RenderContext | None = None,
    style: Style | None = None,
    **options: Any,
) -> list[str]:
    config = ChartConfig.from_options(options)
    ctx = context if context is not None else RenderContext()
    chart = build_chart(kind, data, x_key, y_key, config, ctx)
    return to_lines(chart.canvas, style if style is not None else AnsiStyle())


def chart_headline(kind: str, x_key: str, y_key: str, small_multiples: str | None = None) -> str:
    name = "Line" if kind == "line" else "Dot"
    suffix = f', for each "{small_multiples}"' if small_multiples else ""
    return f'{name} chart of "{y_key}" over "{x_key}"{suffix}:'


def print_chart(
    kind: str,
    data: Any,
    x_key: str,
    y_key: str,
    *,
    file: IO[str] | None = None,
    style: Style | None = None,
    **options: Any,
) -> RenderContext:
    out = sys.stdout if file is None else file
    ctx = RenderContext()
    lines = render_chart(
        kind,
        data,
        x_key,
        y_key,
        context=ctx,
        style=style if style is not None else resolve_style(out),
        **options,
    )
    if not options.get("title"):
        print(f"\n{chart_headline(kind, x_key, y_key, options.get('small_multiples'))}", file=out)
    print("\n".join(lines), file=out)
    return ctx


def line_chart(data: Any, x_key: str, y_key: str, **options: Any) -> RenderContext:
    return print_chart("line", data, x_key, y_key, **options)


def dot_chart(data: Any, x_key: str, y_key: str, **options: Any) -> RenderContext:
    return print_chart("dot", data, x_key, y_key, **options)


def render_bars(
    data: Any,
    labels: str,
    values: str,
    *,
    style: Style | None = None,
    **options: Any,
) -> list[str]:
    config = BarConfig.from_options(options)
    records = normalize_records(data)
    canvas = render_bar_chart(records, labels, values, config)
    return to_lines(canvas, style if style is not None else AnsiStyle(), trim=True)


def bar_chart(
    data: Any,
    labels: str,
    values: str,
    *,
    file: IO[str] | None = None,
    style: Style | None = None,
    **options: Any,
) -> None:
    out = sys.stdout if file is None else file
    resolved = style if style is not None else resolve_style(out)
    lines = render_bars(data, labels, values, style=resolved, **options)
    print("\n" + resolved.paint(f'Bar chart: "{values}" per "{labels}"', HEADLINE_COLOR), file=out)
    print("\n".join(lines), file=out)
