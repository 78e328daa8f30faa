from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Iterable, Mapping, Sequence

from textplot.errors import InvalidDataType, UnknownCategory


PALETTE: tuple[str, ...] = (
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
)
DEFAULT_SERIES_COLOR = "orange"
MUTED_COLOR = "muted"
TITLE_COLOR = "title"
BAR_COLOR = "purple"
HEADLINE_COLOR = "bold"


@dataclass(frozen=True)
class CategoryColor:
    category: Any
    color: str


def category_of(record: Mapping[str, Any], key: str, index: int) -> Any:
    value = record.get(key)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        raise InvalidDataType(f'Row {index}: category value "{key}" is undefined or null.', key=key, index=index)
    return value


def group_by_field(records: Iterable[Mapping[str, Any]], key: str) -> dict[Any, list[Mapping[str, Any]]]:
    """Split records by category in first-seen order. Every record lands in a group."""
    groups: dict[Any, list[Mapping[str, Any]]] = {}
    for i, record in enumerate(records):
        groups.setdefault(category_of(record, key, i), []).append(record)
    return groups


def distinct_categories(records: Iterable[Mapping[str, Any]], key: str) -> list[Any]:
    return list(group_by_field(records, key))


def assign_colors(categories: Sequence[Any], palette: Sequence[str] = PALETTE) -> list[CategoryColor]:
    if not palette:
        raise ValueError("palette must not be empty")
    return [CategoryColor(category=c, color=palette[i % len(palette)]) for i, c in enumerate(categories)]


def color_table(
    categories: Sequence[Any],
    supplied: Mapping[Any, str] | None = None,
) -> list[CategoryColor]:
    if supplied is None:
        return assign_colors(categories)
    return [CategoryColor(category=c, color=lookup_color(supplied, c)) for c in categories]


def lookup_color(table: Mapping[Any, str], category: Any) -> str:
    try:
        return table[category]
    except (KeyError, TypeError):
        raise UnknownCategory(category) from None
