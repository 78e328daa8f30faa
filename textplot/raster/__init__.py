from __future__ import annotations

from textplot.errors import PlotDataError
from textplot.series import SeriesRenderer

from .canvas import EMPTY_OWNER, Canvas, blit, canvas_text, draw_cell, draw_hline, draw_vline, new_canvas, recolor_text
from .draw_lines import LineRenderer, draw_polyline
from .draw_markers import DotRenderer
from .draw_text import draw_text


def renderer_for(kind: str) -> SeriesRenderer:
    if kind == "line":
        return LineRenderer()
    if kind == "dot":
        return DotRenderer()
    raise PlotDataError(f"unsupported chart kind: {kind}")


__all__ = [
    "EMPTY_OWNER",
    "Canvas",
    "DotRenderer",
    "LineRenderer",
    "blit",
    "canvas_text",
    "draw_cell",
    "draw_hline",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "recolor_text",
    "renderer_for",
]
