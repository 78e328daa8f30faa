from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from textplot.context import RenderContext
from textplot.raster.canvas import EMPTY_OWNER, Canvas, draw_cell
from textplot.scales import aggregate_columns, fill_interior_gaps
from textplot.series import ColorFn, ProjectedPoint, group_by_category


FLAT = "─"
VERTICAL = "│"
RISE_START = "┘"
RISE_END = "┌"
FALL_START = "┐"
FALL_END = "└"
POINT = "•"


class LineRenderer:
    kind = "line"

    def render_series(
        self,
        points: Sequence[ProjectedPoint],
        canvas: Canvas,
        color_for: ColorFn,
        ctx: RenderContext,
    ) -> None:
        groups = group_by_category(points)
        colors = [color_for(category) for category, _ in groups]
        for owner, ((_, group), color) in enumerate(zip(groups, colors, strict=True)):
            if len(group) > canvas.width:
                ctx.note_downsampled(len(group), canvas.width)
            columns = np.asarray([p.column for p in group], dtype=np.int64)
            rows = np.asarray([p.row for p in group], dtype=np.int64)
            aggregates = fill_interior_gaps(aggregate_columns(columns, rows, canvas.width))
            draw_polyline(canvas, aggregates, color, owner=owner, ctx=ctx)


def draw_polyline(dst: Canvas, rows: np.ndarray, color: str, *, owner: int, ctx: RenderContext) -> None:
    """Draw one glyph run per column describing travel to the next column's row."""
    width = int(rows.size)
    for x in range(width):
        curr = rows[x]
        if math.isnan(curr):
            continue
        nxt = rows[x + 1] if x + 1 < width else math.nan
        y0 = int(curr)
        if math.isnan(nxt):
            _put(dst, x, y0, POINT, color, owner, ctx)
            continue
        y1 = int(nxt)
        if y1 == y0:
            _put(dst, x, y0, FLAT, color, owner, ctx)
        elif y1 < y0:
            _put(dst, x, y0, RISE_START, color, owner, ctx)
            for y in range(y0 - 1, y1, -1):
                _put(dst, x, y, VERTICAL, color, owner, ctx)
            _put(dst, x, y1, RISE_END, color, owner, ctx)
        else:
            _put(dst, x, y0, FALL_START, color, owner, ctx)
            for y in range(y0 + 1, y1):
                _put(dst, x, y, VERTICAL, color, owner, ctx)
            _put(dst, x, y1, FALL_END, color, owner, ctx)


def _put(dst: Canvas, x: int, y: int, char: str, color: str, owner: int, ctx: RenderContext) -> None:
    previous = draw_cell(dst, x, y, char, color, owner)
    if previous != EMPTY_OWNER and previous != owner:
        ctx.note_overlap("categories")
