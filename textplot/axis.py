from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from textplot.scales import interpolate, midpoint, round_half_up


TICK_LINE = "─"
TICK_MARK = "┬"
LABEL_GAP = 3


@dataclass(frozen=True)
class AxisSpec:
    vmin: Any
    vmax: Any
    formatter: Callable[[Any], str]
    tick_count: int = 2


@dataclass(frozen=True)
class XAxis:
    ticks: tuple[int, ...]
    labels: tuple[str, ...]
    label_row: str
    tick_row: str


@dataclass(frozen=True)
class YAxis:
    max_label: str
    min_label: str

    @property
    def width(self) -> int:
        return len(self.max_label)


def tick_values(vmin: Any, vmax: Any, count: int) -> list[Any]:
    if count < 2:
        raise ValueError("tick count must be >= 2")
    return [interpolate(vmin, vmax, k / (count - 1)) for k in range(count)]


def tick_columns(count: int, width: int) -> list[int]:
    if count < 2:
        raise ValueError("tick count must be >= 2")
    cols = round_half_up(np.arange(count, dtype=np.float64) * (width - 1) / (count - 1))
    np.clip(cols, 0, width - 1, out=cols)
    return [int(c) for c in cols.tolist()]


def build_x_axis(axis: AxisSpec, width: int) -> XAxis:
    """Lay out x tick labels under their columns.

    The first label is left-aligned and the last right-aligned. Interior labels
    are centered on their tick and dropped when they would touch a neighbour.
    Labels are never truncated; the label row grows past `width` instead.
    """
    if width < 1:
        raise ValueError("width must be >= 1")
    if axis.vmin == axis.vmax:
        text = axis.formatter(axis.vmin)
        col = midpoint(width)
        start = max(0, col - len(text) // 2)
        return XAxis(
            ticks=(col,),
            labels=(text,),
            label_row=_place([(start, text)], width),
            tick_row=_tick_row([col], width),
        )

    values = tick_values(axis.vmin, axis.vmax, axis.tick_count)
    cols = tick_columns(axis.tick_count, width)
    texts = [axis.formatter(v) for v in values]

    first = texts[0]
    last = texts[-1]
    last_start = max(width - len(last), len(first) + LABEL_GAP)
    placed: list[tuple[int, str]] = [(0, first)]
    ticks = [cols[0]]
    prev_end = len(first)
    for col, text in zip(cols[1:-1], texts[1:-1], strict=True):
        start = max(0, col - len(text) // 2)
        end = start + len(text)
        if start <= prev_end or end >= last_start:
            continue
        placed.append((start, text))
        ticks.append(col)
        prev_end = end
    placed.append((last_start, last))
    ticks.append(cols[-1])

    return XAxis(
        ticks=tuple(ticks),
        labels=tuple(text for _, text in placed),
        label_row=_place(placed, width),
        tick_row=_tick_row(ticks, width),
    )


def build_y_axis(axis: AxisSpec, height: int) -> YAxis:
    if height < 1:
        raise ValueError("height must be >= 1")
    max_label = axis.formatter(axis.vmax)
    min_label = axis.formatter(axis.vmin)
    size = max(len(max_label), len(min_label))
    return YAxis(max_label=max_label.rjust(size), min_label=min_label.rjust(size))


def _place(items: list[tuple[int, str]], width: int) -> str:
    size = max([width] + [start + len(text) for start, text in items])
    row = [" "] * size
    for start, text in items:
        row[start : start + len(text)] = list(text)
    return "".join(row)


def _tick_row(ticks: list[int], width: int) -> str:
    row = [TICK_LINE] * width
    for col in ticks:
        if 0 < col < width - 1:
            row[col] = TICK_MARK
    return "".join(row)
