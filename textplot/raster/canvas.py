from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


EMPTY_OWNER = -1


@dataclass
class Canvas:
    chars: np.ndarray
    colors: np.ndarray
    owners: np.ndarray

    @property
    def width(self) -> int:
        return int(self.chars.shape[1])

    @property
    def height(self) -> int:
        return int(self.chars.shape[0])


def new_canvas(width: int, height: int, fill: str = " ") -> Canvas:
    if width < 0 or height < 0:
        raise ValueError("canvas width/height must be >= 0")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return Canvas(
        chars=np.full((height, width), fill, dtype="<U1"),
        colors=np.full((height, width), "", dtype=object),
        owners=np.full((height, width), EMPTY_OWNER, dtype=np.int32),
    )


def draw_cell(dst: Canvas, x: int, y: int, char: str, color: str = "", owner: int = EMPTY_OWNER) -> int:
    """Write one cell and return the owner it replaced (EMPTY_OWNER when clipped)."""
    if y < 0 or y >= dst.height or x < 0 or x >= dst.width:
        return EMPTY_OWNER
    previous = int(dst.owners[y, x])
    dst.chars[y, x] = char
    dst.colors[y, x] = color
    dst.owners[y, x] = owner
    return previous


def draw_hline(dst: Canvas, x0: int, x1: int, y: int, char: str, color: str = "") -> None:
    if y < 0 or y >= dst.height:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.width - 1, max(x0, x1))
    if xa > xb:
        return
    dst.chars[y, xa : xb + 1] = char
    dst.colors[y, xa : xb + 1] = color


def draw_vline(dst: Canvas, x: int, y0: int, y1: int, char: str, color: str = "") -> None:
    if x < 0 or x >= dst.width:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.height - 1, max(y0, y1))
    if ya > yb:
        return
    dst.chars[ya : yb + 1, x] = char
    dst.colors[ya : yb + 1, x] = color


def blit(dst: Canvas, src: Canvas, x0: int = 0, y0: int = 0) -> None:
    xa = max(0, x0)
    ya = max(0, y0)
    x1 = min(dst.width, x0 + src.width)
    y1 = min(dst.height, y0 + src.height)
    if ya >= y1 or xa >= x1:
        return
    sx = xa - x0
    sy = ya - y0
    h = y1 - ya
    w = x1 - xa
    dst.chars[ya:y1, xa:x1] = src.chars[sy : sy + h, sx : sx + w]
    dst.colors[ya:y1, xa:x1] = src.colors[sy : sy + h, sx : sx + w]
    dst.owners[ya:y1, xa:x1] = src.owners[sy : sy + h, sx : sx + w]


def canvas_text(canvas: Canvas) -> list[str]:
    return ["".join(row) for row in canvas.chars.tolist()]


def recolor_text(canvas: Canvas, labels: Iterable[str], color: str) -> None:
    """Color every unstyled occurrence of each label, longest labels first."""
    ordered = sorted({label for label in labels if label and label.strip()}, key=len, reverse=True)
    if not ordered:
        return
    for y, text in enumerate(canvas_text(canvas)):
        for label in ordered:
            start = text.find(label)
            while start != -1:
                end = start + len(label)
                if all(c == "" for c in canvas.colors[y, start:end].tolist()):
                    canvas.colors[y, start:end] = color
                start = text.find(label, end)
