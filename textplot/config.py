from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

from textplot.scales import format_ordinal, format_value


Formatter = Callable[[Any], str]

DEFAULT_WIDTH = 75
DEFAULT_HEIGHT = 15
DEFAULT_PER_ROW = 2
DEFAULT_X_TICK_COUNT = 2
DEFAULT_GAP = 3
DEFAULT_BAR_WIDTH = 40


@dataclass(frozen=True)
class ChartConfig:
    """Every option of a line or dot chart, with its default.

    `decimals` only affects the default y formatter; an explicit `format_y`
    wins. `colors` maps category values to color ids and disables automatic
    color assignment.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    small_multiples: str | None = None
    fixed_scales: bool = False
    small_multiples_per_row: int = DEFAULT_PER_ROW
    title: str | None = None
    categories: str | None = None
    colors: Mapping[Any, str] | None = None
    format_x: Formatter | None = None
    format_y: Formatter | None = None
    decimals: int | None = None
    x_tick_count: int = DEFAULT_X_TICK_COUNT
    gap: int = DEFAULT_GAP

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("width and height must be >= 2")
        if self.small_multiples_per_row < 1:
            raise ValueError("small_multiples_per_row must be >= 1")
        if self.x_tick_count < 2:
            raise ValueError("x_tick_count must be >= 2")
        if self.decimals is not None and self.decimals < 0:
            raise ValueError("decimals must be >= 0")
        if self.gap < 0:
            raise ValueError("gap must be >= 0")
        if self.small_multiples is not None and self.categories is not None:
            raise ValueError("small_multiples and categories are mutually exclusive")
        if self.small_multiples is not None and self.width // self.small_multiples_per_row < 2:
            raise ValueError("width is too small for small_multiples_per_row")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "ChartConfig":
        return cls(**_checked_options(cls, options, "chart"))

    def x_formatter(self) -> Formatter:
        if self.format_x is not None:
            return self.format_x
        return format_ordinal

    def y_formatter(self) -> Formatter:
        if self.format_y is not None:
            return self.format_y
        decimals = self.decimals
        return lambda value: format_value(value, decimals=decimals)


@dataclass(frozen=True)
class BarConfig:
    width: int = DEFAULT_BAR_WIDTH
    compact: bool = False
    total_label: str | None = None
    format_labels: Formatter | None = None
    format_values: Formatter | None = None
    decimals: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.decimals is not None and self.decimals < 0:
            raise ValueError("decimals must be >= 0")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "BarConfig":
        return cls(**_checked_options(cls, options, "bar chart"))

    def label_formatter(self) -> Formatter:
        if self.format_labels is not None:
            return self.format_labels
        return str

    def value_formatter(self) -> Formatter:
        if self.format_values is not None:
            return self.format_values
        decimals = self.decimals
        return lambda value: format_value(value, decimals=decimals)


def _checked_options(cls: type, options: Mapping[str, Any] | None, kind: str) -> dict[str, Any]:
    known = {f.name for f in fields(cls)}
    out: dict[str, Any] = {}
    for key, value in (options or {}).items():
        if key not in known:
            raise ValueError(f"Unknown {kind} option: {key}")
        if value is None:
            continue
        out[key] = value
    return out
