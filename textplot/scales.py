from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Mapping, Sequence

import numpy as np

from textplot.adapters.normalize import require_number
from textplot.errors import NoData
from textplot.series import ProjectedPoint

if TYPE_CHECKING:
    from textplot.context import RenderContext


def round_half_up(values: Any) -> np.ndarray:
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def midpoint(size: int) -> int:
    return (size - 1) // 2


def map_columns(n: int, width: int) -> np.ndarray:
    if width <= 0:
        raise ValueError("width must be > 0")
    if n <= 0:
        return np.zeros(0, dtype=np.int64)
    if n == 1:
        return np.asarray([midpoint(width)], dtype=np.int64)
    idx = np.arange(n, dtype=np.float64)
    cols = round_half_up(idx * width / (n - 1))
    np.clip(cols, 0, width - 1, out=cols)
    return cols


def map_rows(values: Any, vmin: float, vmax: float, height: int) -> np.ndarray:
    """Top-origin rows: the max value lands on row 0, the min on `height - 1`."""
    if height <= 0:
        raise ValueError("height must be > 0")
    vals = np.asarray(values, dtype=np.float64)
    if vmax == vmin:
        return np.full(vals.shape, midpoint(height), dtype=np.int64)
    levels = round_half_up((vals - vmin) * (height - 1) / (vmax - vmin))
    np.clip(levels, 0, height - 1, out=levels)
    return (height - 1) - levels


def project_points(
    records: Sequence[Mapping[str, Any]],
    y_key: str,
    vmin: Any,
    vmax: Any,
    width: int,
    height: int,
    *,
    category_key: str | None = None,
    ctx: "RenderContext | None" = None,
) -> list[ProjectedPoint]:
    values = [float(require_number(record.get(y_key), key=y_key, index=i)) for i, record in enumerate(records)]
    lo = float(vmin)
    hi = float(vmax)
    if ctx is not None:
        if len(values) == 1:
            ctx.note_degenerate("single data point")
        if hi == lo:
            ctx.note_degenerate("zero magnitude range")
    cols = map_columns(len(values), width)
    rows = map_rows(values, lo, hi, height)
    return [
        ProjectedPoint(
            column=int(col),
            row=int(row),
            category=record.get(category_key) if category_key is not None else None,
        )
        for col, row, record in zip(cols.tolist(), rows.tolist(), records, strict=True)
    ]


def aggregate_columns(columns: Any, rows: Any, width: int) -> np.ndarray:
    cols = np.asarray(columns, dtype=np.int64)
    vals = np.asarray(rows, dtype=np.float64)
    out = np.full(width, np.nan, dtype=np.float64)
    if cols.size == 0:
        return out
    sums = np.bincount(cols, weights=vals, minlength=width)
    counts = np.bincount(cols, minlength=width)
    filled = counts > 0
    out[filled] = np.floor(sums[filled] / counts[filled] + 0.5)
    return out


def fill_interior_gaps(aggregates: np.ndarray) -> np.ndarray:
    out = aggregates.copy()
    known = np.flatnonzero(np.isfinite(out))
    if known.size < 2:
        return out
    prev = out[known[0]]
    for col in range(int(known[0]) + 1, int(known[-1])):
        if np.isnan(out[col]):
            out[col] = prev
        else:
            prev = out[col]
    return out


def compute_range(records: Sequence[Mapping[str, Any]], key: str) -> tuple[Any, Any]:
    values = [record.get(key) for record in records]
    if not values:
        raise NoData(f"no values for {key!r}")
    try:
        return (min(values), max(values))
    except TypeError as exc:
        raise NoData(f"values of {key!r} are not comparable") from exc


def interpolate(vmin: Any, vmax: Any, t: float) -> Any:
    if t <= 0.0:
        return vmin
    if t >= 1.0:
        return vmax
    if isinstance(vmin, Decimal) or isinstance(vmax, Decimal):
        vmin = float(vmin)
        vmax = float(vmax)
    return vmin + (vmax - vmin) * t


def format_value(value: Any, *, decimals: int | None = None) -> str:
    if isinstance(value, dt.date):
        return format_ordinal(value)
    number = float(value)
    if not np.isfinite(number):
        return str(number)
    if decimals is not None:
        out = f"{number:.{decimals}f}"
    else:
        try:
            out = format(Decimal(repr(number)), "f")
        except InvalidOperation:
            out = repr(number)
        # Only trim zeros after a decimal point (keep 30, 40).
        if "." in out:
            out = out.rstrip("0").rstrip(".")
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def format_ordinal(value: Any) -> str:
    if isinstance(value, dt.datetime):
        if value.time() == dt.time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ", timespec="minutes")
    if isinstance(value, dt.date):
        return value.isoformat()
    return format_value(value)
