from __future__ import annotations

from typing import Any, Mapping, Sequence

from textplot.adapters.normalize import require_finite_number
from textplot.colors import BAR_COLOR, MUTED_COLOR
from textplot.config import BarConfig
from textplot.errors import NoData
from textplot.raster import Canvas, draw_text, new_canvas
from textplot.scales import format_value


BAR = "█"


def bar_length(value: float, vmax: float, width: int) -> int:
    if vmax <= 0 or value <= 0:
        return 0
    return int(value / vmax * width + 0.5)


def share_label(value: float, total: float) -> str:
    share = value / total * 100 if total else 0.0
    return format_value(round(share, 2)) + "%"


def render_bar_chart(
    records: Sequence[Mapping[str, Any]],
    labels: str,
    values: str,
    config: BarConfig,
) -> Canvas:
    """Horizontal bars, one per record, in input order.

    The first row holds the total, centered over the bars. Each bar row carries
    the formatted value and its share of the total.
    """
    if not records:
        raise NoData("Data array is empty.")
    numbers = [float(require_finite_number(record.get(values), key=values, index=i)) for i, record in enumerate(records)]
    format_label = config.label_formatter()
    format_number = config.value_formatter()

    names = [format_label(record.get(labels)) for record in records]
    label_w = max(len(name) for name in names)
    vmax = max(numbers)
    total = sum(numbers)

    total_text = f"{config.total_label}: " if config.total_label else f'Total "{values}": '
    total_text += format_number(total)
    indent = max(0, int(label_w + 1 + config.width / 2 - len(total_text) / 2 + 0.5))

    rows: list[list[tuple[str, str]]] = [[(" " * indent, ""), (total_text, MUTED_COLOR)]]
    pad = " " * label_w
    rows.append([(pad, ""), (" ┌", MUTED_COLOR)])
    for i, (name, number) in enumerate(zip(names, numbers, strict=True)):
        rows.append(
            [
                (name.rjust(label_w), ""),
                (" ┤", MUTED_COLOR),
                (BAR * bar_length(number, vmax, config.width), BAR_COLOR),
                (" " + format_number(number) + " ", ""),
                (share_label(number, total), MUTED_COLOR),
            ]
        )
        if i == len(names) - 1:
            rows.append([(pad, ""), (" └", MUTED_COLOR)])
        elif not config.compact:
            rows.append([(pad, ""), (" │", MUTED_COLOR)])

    canvas = new_canvas(max(sum(len(text) for text, _ in row) for row in rows), len(rows))
    for y, row in enumerate(rows):
        x = 0
        for text, color in row:
            draw_text(canvas, x, y, text, color)
            x += len(text)
    return canvas
