from __future__ import annotations

from typing import Sequence

from textplot.context import RenderContext
from textplot.raster.canvas import EMPTY_OWNER, Canvas, draw_cell
from textplot.series import ColorFn, ProjectedPoint, group_by_category


MARKER = "•"


class DotRenderer:
    kind = "dot"

    def render_series(
        self,
        points: Sequence[ProjectedPoint],
        canvas: Canvas,
        color_for: ColorFn,
        ctx: RenderContext,
    ) -> None:
        owners: dict[object, int] = {}
        colors: dict[object, str] = {}
        for owner, (category, _) in enumerate(group_by_category(points)):
            owners[category] = owner
            colors[category] = color_for(category)
        for point in points:
            previous = draw_cell(
                canvas,
                point.column,
                point.row,
                MARKER,
                colors[point.category],
                owners[point.category],
            )
            if previous != EMPTY_OWNER:
                ctx.note_overlap("points")
