from textplot.adapters.normalize import validate_data_types
from textplot.api import bar_chart, dot_chart, line_chart, render_bars, render_chart
from textplot.colors import PALETTE, CategoryColor, assign_colors
from textplot.config import BarConfig, ChartConfig
from textplot.context import RenderContext
from textplot.errors import InvalidDataType, NoData, PlotDataError, UnknownCategory
from textplot.style import AnsiStyle, PlainStyle, Style

__all__ = [
    "PALETTE",
    "AnsiStyle",
    "BarConfig",
    "CategoryColor",
    "ChartConfig",
    "InvalidDataType",
    "NoData",
    "PlainStyle",
    "PlotDataError",
    "RenderContext",
    "Style",
    "UnknownCategory",
    "assign_colors",
    "bar_chart",
    "dot_chart",
    "line_chart",
    "render_bars",
    "render_chart",
    "validate_data_types",
]
