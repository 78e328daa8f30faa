from __future__ import annotations

from textplot.raster.canvas import Canvas, draw_cell


def draw_text(dst: Canvas, x: int, y: int, text: str, color: str = "") -> None:
    for i, char in enumerate(text):
        draw_cell(dst, x + i, y, char, color)
