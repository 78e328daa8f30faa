from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from textplot.axis import AxisSpec, XAxis, YAxis, build_x_axis, build_y_axis
from textplot.colors import (
    DEFAULT_SERIES_COLOR,
    MUTED_COLOR,
    TITLE_COLOR,
    CategoryColor,
    color_table,
    distinct_categories,
    lookup_color,
)
from textplot.config import ChartConfig
from textplot.context import RenderContext
from textplot.raster import Canvas, blit, draw_cell, draw_hline, draw_text, draw_vline, new_canvas, renderer_for
from textplot.scales import compute_range, project_points
from textplot.series import ColorFn


LEGEND_MARKER = "•"
LEGEND_SPACING = 2


@dataclass
class Chart:
    canvas: Canvas
    x_labels: list[str] = field(default_factory=list)
    title: str | None = None

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height


def legend_text(entries: Sequence[CategoryColor]) -> str:
    return (" " * LEGEND_SPACING).join(f"{LEGEND_MARKER} {entry.category}" for entry in entries)


def compose_chart(
    plot: Canvas,
    x_axis: XAxis,
    y_axis: YAxis,
    *,
    title: str | None = None,
    legend: Sequence[CategoryColor] | None = None,
) -> Chart:
    label_w = y_axis.width
    plot_w = plot.width
    plot_h = plot.height
    right = label_w + plot_w + 1
    legend_row = legend_text(legend) if legend else ""
    total_w = max(right + 1, label_w + 1 + len(x_axis.label_row), len(title or ""), len(legend_row))
    total_h = plot_h + 3 + (1 if title else 0) + (1 if legend else 0)
    canvas = new_canvas(total_w, total_h)

    top = 0
    if title:
        draw_text(canvas, 0, top, title, TITLE_COLOR)
        top += 1
    if legend:
        x = 0
        for entry in legend:
            draw_cell(canvas, x, top, LEGEND_MARKER, entry.color)
            draw_text(canvas, x + 2, top, str(entry.category))
            x += len(f"{LEGEND_MARKER} {entry.category}") + LEGEND_SPACING
        top += 1

    draw_cell(canvas, label_w, top, "┌", MUTED_COLOR)
    draw_hline(canvas, label_w + 1, label_w + plot_w, top, "─", MUTED_COLOR)
    draw_cell(canvas, right, top, "┐", MUTED_COLOR)
    draw_vline(canvas, label_w, top + 1, top + plot_h, "│", MUTED_COLOR)
    draw_vline(canvas, right, top + 1, top + plot_h, "│", MUTED_COLOR)
    blit(canvas, plot, label_w + 1, top + 1)
    draw_text(canvas, 0, top + 1, y_axis.max_label, MUTED_COLOR)
    draw_text(canvas, 0, top + plot_h, y_axis.min_label, MUTED_COLOR)

    tick_y = top + plot_h + 1
    draw_cell(canvas, label_w, tick_y, "└", MUTED_COLOR)
    draw_text(canvas, label_w + 1, tick_y, x_axis.tick_row, MUTED_COLOR)
    draw_cell(canvas, right, tick_y, "┘", MUTED_COLOR)
    draw_text(canvas, label_w + 1, tick_y + 1, x_axis.label_row)

    return Chart(canvas=canvas, x_labels=list(x_axis.labels), title=title)


def draw_chart(
    kind: str,
    records: Sequence[Mapping[str, Any]],
    x_key: str,
    y_key: str,
    config: ChartConfig,
    ctx: RenderContext,
    *,
    color_for: ColorFn,
    category_key: str | None = None,
    x_range: tuple[Any, Any] | None = None,
    y_range: tuple[Any, Any] | None = None,
    legend: Sequence[CategoryColor] | None = None,
) -> Chart:
    renderer = renderer_for(kind)
    xmin, xmax = x_range if x_range is not None else compute_range(records, x_key)
    ymin, ymax = y_range if y_range is not None else compute_range(records, y_key)

    plot = new_canvas(config.width, config.height)
    points = project_points(
        records,
        y_key,
        ymin,
        ymax,
        config.width,
        config.height,
        category_key=category_key,
        ctx=ctx,
    )
    renderer.render_series(points, plot, color_for, ctx)

    x_axis = build_x_axis(AxisSpec(xmin, xmax, config.x_formatter(), config.x_tick_count), config.width)
    y_axis = build_y_axis(AxisSpec(ymin, ymax, config.y_formatter()), config.height)
    return compose_chart(plot, x_axis, y_axis, title=config.title, legend=legend)


def render_single(
    kind: str,
    records: Sequence[Mapping[str, Any]],
    x_key: str,
    y_key: str,
    config: ChartConfig,
    ctx: RenderContext,
) -> Chart:
    if config.categories is None:
        return draw_chart(kind, records, x_key, y_key, config, ctx, color_for=lambda _: DEFAULT_SERIES_COLOR)

    entries = color_table(distinct_categories(records, config.categories), config.colors)
    table = {entry.category: entry.color for entry in entries}
    return draw_chart(
        kind,
        records,
        x_key,
        y_key,
        config,
        ctx,
        color_for=lambda category: lookup_color(table, category),
        category_key=config.categories,
        legend=entries,
    )

