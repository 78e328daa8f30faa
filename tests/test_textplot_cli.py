from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from textplot.cli import load_records, main, parse_args, parse_dates
from textplot.errors import PlotDataError


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, payload: object) -> str:
        path = self.root / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        out = io.StringIO()
        err = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_line_chart_from_json(self) -> None:
        path = self._write("rising.json", [{"x": 0, "y": 0}, {"x": 1, "y": 5}, {"x": 2, "y": 10}])
        code, out, _ = self._run(["--no-color", "line", path, "--x", "x", "--y", "y", "--width", "4", "--height", "3"])
        self.assertEqual(code, 0)
        self.assertIn('Line chart of "y" over "x":', out)
        self.assertIn("10│  ┌•│", out)

    def test_bar_chart_from_json(self) -> None:
        path = self._write("bars.json", [{"name": "a", "v": 1}, {"name": "bb", "v": 3}])
        code, out, _ = self._run(["--no-color", "bar", path, "--labels", "name", "--values", "v", "--width", "6"])
        self.assertEqual(code, 0)
        self.assertIn("bb ┤██████ 3 75%", out)

    def test_invalid_data_exits_with_two(self) -> None:
        path = self._write("bad.json", [{"x": 0, "y": "high"}])
        code, out, err = self._run(["line", path, "--x", "x", "--y", "y"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn('textplot: Row 0: y-axis value "y" must be a number', err)

    def test_missing_file_exits_with_two(self) -> None:
        code, _, err = self._run(["dot", str(self.root / "nope.json"), "--x", "x", "--y", "y"])
        self.assertEqual(code, 2)
        self.assertTrue(err.startswith("textplot: "))

    def test_json_must_be_an_array(self) -> None:
        path = self._write("object.json", {"x": 1})
        with self.assertRaises(PlotDataError):
            load_records(Path(path))

    def test_parse_dates(self) -> None:
        records = parse_dates([{"day": "2024-01-02", "y": 1}], "day")
        self.assertEqual(records[0]["day"].isoformat(), "2024-01-02T00:00:00")
        with self.assertRaises(PlotDataError):
            parse_dates([{"day": "yesterday"}], "day")

    def test_dates_on_the_x_axis(self) -> None:
        path = self._write(
            "days.json",
            [{"day": "2024-01-01", "n": 1}, {"day": "2024-01-03", "n": 2}],
        )
        code, out, _ = self._run(
            ["--no-color", "line", path, "--x", "day", "--y", "n", "--width", "30", "--height", "3", "--parse-dates"]
        )
        self.assertEqual(code, 0)
        self.assertIn("2024-01-01", out)
        self.assertIn("2024-01-03", out)

    def test_csv_input(self) -> None:
        try:
            import pandas  # noqa: F401
        except Exception:
            self.skipTest("pandas is not installed")
        path = self.root / "rising.csv"
        path.write_text("x,y\n0,0\n1,5\n2,10\n", encoding="utf-8")
        self.assertEqual(load_records(path), [{"x": 0, "y": 0}, {"x": 1, "y": 5}, {"x": 2, "y": 10}])

    def test_small_multiples_flags(self) -> None:
        args = parse_args(["line", "data.json", "--x", "x", "--y", "y", "--small-multiples", "g", "--fixed-scales"])
        self.assertEqual(args.small_multiples, "g")
        self.assertTrue(args.fixed_scales)
        self.assertIsNone(args.width)


if __name__ == "__main__":
    unittest.main()
