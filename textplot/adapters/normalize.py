from __future__ import annotations

from collections.abc import Iterable, Mapping
import datetime as dt
from decimal import Decimal
import math
import numbers
from typing import Any

import numpy as np

from textplot.errors import InvalidDataType, NoData, PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def normalize_records(data: Any) -> list[dict[str, Any]]:
    if pd is not None and isinstance(data, pd.DataFrame):
        rows: Iterable[Any] = data.to_dict("records")
    elif isinstance(data, Mapping) or isinstance(data, (str, bytes, bytearray)):
        raise PlotDataError("data must be a sequence of records")
    elif isinstance(data, Iterable):
        rows = data
    else:
        raise PlotDataError(f"unsupported data input type: {type(data)!r}")

    out: list[dict[str, Any]] = []
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise PlotDataError(f"Row {i}: expected a mapping, got {type(row).__name__}")
        out.append({key: _coerce_scalar(value) for key, value in row.items()})
    return out


def _coerce_scalar(value: Any) -> Any:
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return None
        return value.astype("datetime64[us]").astype(dt.datetime)
    if isinstance(value, np.generic):
        return value.item()
    if pd is not None and value is pd.NaT:
        return None
    return value


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_temporal(value: Any) -> bool:
    return isinstance(value, dt.date)


def require_number(value: Any, *, key: str, index: int | None = None) -> Any:
    if not is_number(value):
        where = f"Row {index}: " if index is not None else ""
        raise InvalidDataType(
            f'{where}the value of "{key}" is not a number: {value!r}',
            key=key,
            value=value,
            index=index,
        )
    return value


def require_finite_number(value: Any, *, key: str, index: int | None = None) -> Any:
    require_number(value, key=key, index=index)
    if not math.isfinite(float(value)):
        where = f"Row {index}: " if index is not None else ""
        raise InvalidDataType(
            f'{where}the value of "{key}" must be finite: {value!r}',
            key=key,
            value=value,
            index=index,
        )
    return value


def validate_data_types(data: list[Mapping[str, Any]], x: str, y: str) -> None:
    if len(data) == 0:
        raise NoData("Data array is empty.")

    x_kind: str | None = None
    for i, row in enumerate(data):
        x_value = row.get(x)
        if x_value is None:
            raise InvalidDataType(f'Row {i}: x-axis value "{x}" is undefined or null.', key=x, index=i)
        if is_number(x_value):
            kind = "number"
            _require_finite(x_value, axis="x", key=x, index=i)
        elif is_temporal(x_value):
            kind = "date"
        else:
            raise InvalidDataType(
                f'Row {i}: x-axis value "{x}" must be a number or a date. '
                f"Got: {type(x_value).__name__} ({x_value!r})",
                key=x,
                value=x_value,
                index=i,
            )
        if x_kind is None:
            x_kind = kind
        elif kind != x_kind:
            raise InvalidDataType(
                f'Row {i}: x-axis value "{x}" is a {kind} but earlier rows are a {x_kind}.',
                key=x,
                value=x_value,
                index=i,
            )

        y_value = row.get(y)
        if y_value is None:
            raise InvalidDataType(f'Row {i}: y-axis value "{y}" is undefined or null.', key=y, index=i)
        if not is_number(y_value):
            raise InvalidDataType(
                f'Row {i}: y-axis value "{y}" must be a number. Got: {type(y_value).__name__} ({y_value!r})',
                key=y,
                value=y_value,
                index=i,
            )
        _require_finite(y_value, axis="y", key=y, index=i)


def _require_finite(value: Any, *, axis: str, key: str, index: int) -> None:
    if not math.isfinite(float(value)):
        raise InvalidDataType(
            f'Row {index}: {axis}-axis value "{key}" must be finite. Got: {value!r}',
            key=key,
            value=value,
            index=index,
        )


def sort_by_ordinal(records: list[dict[str, Any]], key: str) -> list[dict[str, Any]]:
    try:
        return sorted(records, key=lambda record: record[key])
    except TypeError as exc:
        raise InvalidDataType(f'x-axis values "{key}" cannot be ordered: {exc}', key=key) from exc
