from __future__ import annotations

from itertools import groupby
import os
import sys
from typing import IO

from textplot.raster.canvas import Canvas
from textplot.style import AnsiStyle, PlainStyle, Style


def resolve_style(stream: IO[str] | None = None) -> Style:
    if os.environ.get("NO_COLOR"):
        return PlainStyle()
    target = sys.stdout if stream is None else stream
    try:
        is_tty = bool(target.isatty())
    except (AttributeError, ValueError):
        is_tty = False
    return AnsiStyle() if is_tty else PlainStyle()


def to_lines(canvas: Canvas, style: Style, *, trim: bool = False) -> list[str]:
    """Flatten a canvas, painting each run of equally colored cells once."""
    lines: list[str] = []
    for chars, colors in zip(canvas.chars.tolist(), canvas.colors.tolist(), strict=True):
        if trim:
            end = len(chars)
            while end > 0 and chars[end - 1] == " " and not colors[end - 1]:
                end -= 1
            chars = chars[:end]
            colors = colors[:end]
        parts: list[str] = []
        for color, run in groupby(zip(chars, colors), key=lambda cell: cell[1]):
            text = "".join(char for char, _ in run)
            parts.append(style.paint(text, color) if color else text)
        lines.append("".join(parts))
    return lines
