from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from textplot import PALETTE, AnsiStyle, ChartConfig, InvalidDataType, PlainStyle, UnknownCategory, assign_colors
from textplot.colors import color_table, distinct_categories, group_by_field, lookup_color
from textplot.display import resolve_style, to_lines
from textplot.raster import draw_text, new_canvas


class ChartConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ChartConfig.from_options({})
        self.assertEqual((config.width, config.height), (75, 15))
        self.assertEqual(config.small_multiples_per_row, 2)
        self.assertFalse(config.fixed_scales)
        self.assertEqual(config.x_tick_count, 2)

    def test_none_values_keep_defaults(self) -> None:
        config = ChartConfig.from_options({"width": None, "height": 9})
        self.assertEqual((config.width, config.height), (75, 9))

    def test_unknown_option(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown chart option: size"):
            ChartConfig.from_options({"size": 3})

    def test_invalid_sizes(self) -> None:
        with self.assertRaises(ValueError):
            ChartConfig(width=1)
        with self.assertRaises(ValueError):
            ChartConfig(small_multiples_per_row=0)
        with self.assertRaises(ValueError):
            ChartConfig(decimals=-1)

    def test_y_formatter_uses_decimals(self) -> None:
        self.assertEqual(ChartConfig(decimals=2).y_formatter()(1.5), "1.50")
        self.assertEqual(ChartConfig().y_formatter()(1.5), "1.5")
        self.assertEqual(ChartConfig(format_y=lambda v: f"${v}").y_formatter()(3), "$3")


class ColorTests(unittest.TestCase):
    def test_first_seen_order_gets_palette_order(self) -> None:
        records = [{"c": "A"}, {"c": "B"}, {"c": "A"}, {"c": "C"}]
        entries = assign_colors(distinct_categories(records, "c"))
        self.assertEqual([e.category for e in entries], ["A", "B", "C"])
        self.assertEqual([e.color for e in entries], list(PALETTE[:3]))

    def test_palette_wraps(self) -> None:
        entries = assign_colors(list(range(len(PALETTE) + 1)))
        self.assertEqual(entries[-1].color, PALETTE[0])

    def test_supplied_table_must_cover_categories(self) -> None:
        self.assertEqual([e.color for e in color_table(["x"], {"x": "blue"})], ["blue"])
        with self.assertRaises(UnknownCategory) as caught:
            color_table(["x", "y"], {"x": "blue"})
        self.assertEqual(caught.exception.category, "y")

    def test_grouping_keeps_every_record(self) -> None:
        records = [{"c": "A"}, {"c": 2}, {"c": "A"}, {"c": 2.5}]
        groups = group_by_field(records, "c")
        self.assertEqual(list(groups), ["A", 2, 2.5])
        self.assertEqual(sum(len(rows) for rows in groups.values()), len(records))

    def test_missing_category_names_the_row(self) -> None:
        with self.assertRaises(InvalidDataType) as caught:
            distinct_categories([{"c": "A"}, {}], "c")
        self.assertEqual(caught.exception.index, 1)

    def test_unhashable_category_is_unknown(self) -> None:
        with self.assertRaises(UnknownCategory):
            lookup_color({"x": "blue"}, ["x"])


class StyleTests(unittest.TestCase):
    def test_no_color_env_forces_plain(self) -> None:
        stream = mock.Mock()
        stream.isatty.return_value = True
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            self.assertIsInstance(resolve_style(stream), PlainStyle)

    def test_tty_gets_ansi(self) -> None:
        stream = mock.Mock()
        stream.isatty.return_value = True
        with mock.patch.dict(os.environ, {"NO_COLOR": ""}):
            self.assertIsInstance(resolve_style(stream), AnsiStyle)
            self.assertIsInstance(resolve_style(io.StringIO()), PlainStyle)

    def test_unknown_color_is_unstyled(self) -> None:
        self.assertEqual(AnsiStyle().paint("x", "chartreuse"), "x")
        self.assertEqual(AnsiStyle().paint("x", "red"), "\x1b[31mx\x1b[0m")

    def test_to_lines_trims_unstyled_padding(self) -> None:
        canvas = new_canvas(6, 1)
        draw_text(canvas, 0, 0, "ab", "red")
        self.assertEqual(to_lines(canvas, AnsiStyle(), trim=True), ["\x1b[31mab\x1b[0m"])
        self.assertEqual(to_lines(canvas, PlainStyle()), ["ab    "])


if __name__ == "__main__":
    unittest.main()
