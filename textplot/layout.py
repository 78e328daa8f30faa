from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Sequence

from textplot.colors import TITLE_COLOR, color_table, group_by_field
from textplot.config import ChartConfig
from textplot.context import RenderContext
from textplot.errors import NoData
from textplot.figure import Chart, draw_chart
from textplot.raster import Canvas, blit, draw_text, new_canvas
from textplot.scales import compute_range


def tile_charts(charts: Sequence[Chart], per_row: int, gap: int) -> Canvas:
    """Place charts left to right, `per_row` at a time, with a blank row between rows."""
    if per_row < 1:
        raise ValueError("per_row must be >= 1")
    if not charts:
        raise NoData("no charts to lay out")
    rows = [list(charts[i : i + per_row]) for i in range(0, len(charts), per_row)]
    row_widths = [sum(c.width for c in row) + gap * (len(row) - 1) for row in rows]
    row_heights = [max(c.height for c in row) for row in rows]
    frame = new_canvas(max(row_widths), sum(row_heights) + len(rows) - 1)

    y = 0
    for row, h in zip(rows, row_heights, strict=True):
        x = 0
        for chart in row:
            blit(frame, chart.canvas, x, y)
            x += chart.width + gap
        y += h + 1
    return frame


def render_small_multiples(
    kind: str,
    records: Sequence[Mapping[str, Any]],
    x_key: str,
    y_key: str,
    config: ChartConfig,
    ctx: RenderContext,
) -> Chart:
    if config.small_multiples is None:
        raise ValueError("small_multiples field is not set")
    if not records:
        raise NoData("No data to display.")
    field = config.small_multiples
    groups = group_by_field(records, field)
    entries = color_table(list(groups), config.colors)

    x_range: tuple[Any, Any] | None = None
    y_range: tuple[Any, Any] | None = None
    if config.fixed_scales:
        x_range = compute_range(records, x_key)
        y_range = compute_range(records, y_key)

    sub_width = config.width // config.small_multiples_per_row
    charts: list[Chart] = []
    labels: list[str] = []
    for entry in entries:
        subset = groups[entry.category]
        sub_config = replace(config, small_multiples=None, width=sub_width, title=str(entry.category))
        chart = draw_chart(
            kind,
            subset,
            x_key,
            y_key,
            sub_config,
            ctx,
            color_for=lambda _, color=entry.color: color,
            x_range=x_range,
            y_range=y_range,
        )
        charts.append(chart)
        labels.extend(chart.x_labels)

    if not charts:
        raise NoData("No data to display.")
    frame = tile_charts(charts, config.small_multiples_per_row, config.gap)
    if config.title:
        frame = with_title_row(frame, config.title)
    return Chart(canvas=frame, x_labels=list(dict.fromkeys(labels)), title=config.title)


def with_title_row(frame: Canvas, title: str) -> Canvas:
    out = new_canvas(max(frame.width, len(title)), frame.height + 1)
    draw_text(out, 0, 0, title, TITLE_COLOR)
    blit(out, frame, 0, 1)
    return out
