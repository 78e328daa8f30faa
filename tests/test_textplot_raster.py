from __future__ import annotations

import unittest

import numpy as np

from textplot import RenderContext, UnknownCategory
from textplot.colors import lookup_color
from textplot.raster import (
    DotRenderer,
    LineRenderer,
    blit,
    canvas_text,
    draw_cell,
    draw_text,
    new_canvas,
    recolor_text,
    renderer_for,
)
from textplot.errors import PlotDataError
from textplot.series import ProjectedPoint


def _points(cols: list[int], rows: list[int], category: object = None) -> list[ProjectedPoint]:
    return [ProjectedPoint(column=c, row=r, category=category) for c, r in zip(cols, rows)]


class CanvasTests(unittest.TestCase):
    def test_new_canvas_is_blank(self) -> None:
        canvas = new_canvas(3, 2)
        self.assertEqual(canvas_text(canvas), ["   ", "   "])
        self.assertEqual((canvas.width, canvas.height), (3, 2))

    def test_draw_cell_returns_previous_owner_and_clips(self) -> None:
        canvas = new_canvas(2, 2)
        self.assertEqual(draw_cell(canvas, 0, 0, "a", "red", 4), -1)
        self.assertEqual(draw_cell(canvas, 0, 0, "b", "green", 5), 4)
        self.assertEqual(draw_cell(canvas, 9, 9, "c"), -1)
        self.assertEqual(canvas_text(canvas), ["b ", "  "])

    def test_blit_clips_at_edges(self) -> None:
        dst = new_canvas(4, 2)
        src = new_canvas(3, 3, fill="x")
        blit(dst, src, 2, 1)
        self.assertEqual(canvas_text(dst), ["    ", "  xx"])

    def test_recolor_text_only_touches_unstyled_cells(self) -> None:
        canvas = new_canvas(10, 2)
        draw_text(canvas, 0, 0, "10", "muted")
        draw_text(canvas, 0, 1, "0   10")
        recolor_text(canvas, ["0", "10"], "muted")
        self.assertEqual(canvas.colors[1, :6].tolist(), ["muted", "", "", "", "muted", "muted"])
        self.assertEqual(canvas.colors[0, :2].tolist(), ["muted", "muted"])

    def test_renderer_for_rejects_unknown_kind(self) -> None:
        self.assertIsInstance(renderer_for("line"), LineRenderer)
        self.assertIsInstance(renderer_for("dot"), DotRenderer)
        with self.assertRaises(PlotDataError):
            renderer_for("pie")


class LineRendererTests(unittest.TestCase):
    def test_rising_series_glyphs(self) -> None:
        canvas = new_canvas(4, 3)
        LineRenderer().render_series(_points([0, 2, 3], [2, 1, 0]), canvas, lambda _: "orange", RenderContext())
        self.assertEqual(canvas_text(canvas), ["  ┌•", " ┌┘ ", "─┘  "])

    def test_falling_series_glyphs(self) -> None:
        canvas = new_canvas(4, 3)
        LineRenderer().render_series(_points([0, 3], [0, 2]), canvas, lambda _: "orange", RenderContext())
        self.assertEqual(canvas_text(canvas), ["──┐ ", "  │ ", "  └•"])

    def test_series_cells_carry_color(self) -> None:
        canvas = new_canvas(4, 3)
        LineRenderer().render_series(_points([0, 3], [0, 2]), canvas, lambda _: "orange", RenderContext())
        painted = {color for color in canvas.colors.ravel().tolist() if color}
        self.assertEqual(painted, {"orange"})

    def test_downsampling_is_reported_once(self) -> None:
        canvas = new_canvas(4, 3)
        ctx = RenderContext()
        points = _points([0, 0, 1, 1, 2, 2, 3, 3, 3, 3], [0] * 10)
        with self.assertLogs("textplot.context", level="WARNING") as logs:
            LineRenderer().render_series(points, canvas, lambda _: "orange", ctx)
        self.assertTrue(ctx.downsampled)
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(canvas_text(canvas)[0], "───•")

    def test_overlapping_categories_warn_once(self) -> None:
        canvas = new_canvas(4, 3)
        ctx = RenderContext()
        colors = {"a": "red", "b": "green"}
        points = _points([0, 3], [1, 1], "a") + _points([0, 3], [1, 1], "b")
        with self.assertLogs("textplot.context", level="WARNING") as logs:
            LineRenderer().render_series(points, canvas, lambda c: lookup_color(colors, c), ctx)
        self.assertTrue(ctx.overlap)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("overlapping", logs.output[0])
        self.assertEqual(set(canvas.colors[1].tolist()), {"green"})

    def test_unknown_category_fails_before_drawing(self) -> None:
        canvas = new_canvas(4, 3)
        points = _points([0], [1], "a") + _points([3], [1], "b")
        with self.assertRaises(UnknownCategory) as caught:
            LineRenderer().render_series(points, canvas, lambda c: lookup_color({"a": "red"}, c), RenderContext())
        self.assertEqual(caught.exception.category, "b")
        self.assertEqual(canvas_text(canvas), ["    "] * 3)


class DotRendererTests(unittest.TestCase):
    def test_one_marker_per_point(self) -> None:
        canvas = new_canvas(4, 2)
        DotRenderer().render_series(_points([0, 3], [1, 0]), canvas, lambda _: "orange", RenderContext())
        self.assertEqual(canvas_text(canvas), ["   •", "•   "])
        self.assertEqual(int(np.count_nonzero(canvas.chars == "•")), 2)

    def test_overlap_keeps_last_drawn(self) -> None:
        canvas = new_canvas(2, 2)
        ctx = RenderContext()
        colors = {"a": "red", "b": "green"}
        points = _points([0], [0], "a") + _points([0], [0], "b")
        with self.assertLogs("textplot.context", level="WARNING"):
            DotRenderer().render_series(points, canvas, lambda c: colors[c], ctx)
        self.assertTrue(ctx.overlap)
        self.assertEqual(canvas.colors[0, 0], "green")

    def test_separate_contexts_do_not_share_notices(self) -> None:
        points = _points([0], [0], "a") + _points([0], [0], "b")
        first = RenderContext()
        with self.assertLogs("textplot.context", level="WARNING"):
            DotRenderer().render_series(points, new_canvas(2, 2), lambda c: "red", first)
        second = RenderContext()
        DotRenderer().render_series(_points([0, 1], [0, 1]), new_canvas(2, 2), lambda c: "red", second)
        self.assertTrue(first.overlap)
        self.assertFalse(second.overlap)


if __name__ == "__main__":
    unittest.main()
