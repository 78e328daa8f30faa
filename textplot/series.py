from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Literal, Protocol, Sequence

if TYPE_CHECKING:
    from textplot.context import RenderContext
    from textplot.raster.canvas import Canvas


ChartKind = Literal["line", "dot"]
ColorFn = Callable[[Any], str]


@dataclass(frozen=True)
class ProjectedPoint:
    column: int
    row: int
    category: Any = None


class SeriesRenderer(Protocol):
    kind: ChartKind

    def render_series(
        self,
        points: Sequence[ProjectedPoint],
        canvas: "Canvas",
        color_for: ColorFn,
        ctx: "RenderContext",
    ) -> None:
        ...


def group_by_category(points: Sequence[ProjectedPoint]) -> list[tuple[Any, list[ProjectedPoint]]]:
    groups: dict[Any, list[ProjectedPoint]] = {}
    for point in points:
        groups.setdefault(point.category, []).append(point)
    return list(groups.items())
