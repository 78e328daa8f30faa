from __future__ import annotations

from typing import Any


class PlotDataError(ValueError):
    pass


class InvalidDataType(PlotDataError):
    def __init__(self, message: str, *, key: str, value: Any = None, index: int | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value
        self.index = index


class UnknownCategory(PlotDataError):
    def __init__(self, category: Any) -> None:
        super().__init__(f"category {category!r} has no entry in the color table")
        self.category = category


class NoData(PlotDataError):
    pass
