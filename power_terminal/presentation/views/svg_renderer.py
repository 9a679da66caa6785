"""
SVG serializer for the power chart.

Turns a ``ChartDrawing`` into a standalone ``<svg>`` element. Coordinates are
written with one decimal; non-finite numbers raise ``ChartGeometryError``.
"""

from html import escape
from typing import List

from power_terminal.domain.entities.chart import (
    AxisLabel,
    ChartDrawing,
    GridLine,
    GridLineKind,
    LegendItem,
    SeriesPath,
    ensure_finite,
)

GRID_COLOR = "#e5e5e5"
GRID_WIDTH = 1
AXIS_COLOR = "#333333"
AXIS_WIDTH = 2
LABEL_FONT_SIZE = 14
LABEL_COLOR = "#666666"
LEGEND_TEXT_COLOR = "#333333"
LEGEND_STROKE_WIDTH = 3


def _fmt(value: float) -> str:
    return f"{ensure_finite(value):.1f}"


def _line(line: GridLine) -> str:
    if line.kind is GridLineKind.GRID:
        color, width = GRID_COLOR, GRID_WIDTH
    else:
        color, width = AXIS_COLOR, AXIS_WIDTH
    return (
        f'<line x1="{_fmt(line.x1)}" y1="{_fmt(line.y1)}" '
        f'x2="{_fmt(line.x2)}" y2="{_fmt(line.y2)}" '
        f'stroke="{color}" stroke-width="{width}"/>'
    )


def _label(label: AxisLabel) -> str:
    return (
        f'<text x="{_fmt(label.x)}" y="{_fmt(label.y)}" '
        f'text-anchor="{label.anchor.value}" font-size="{LABEL_FONT_SIZE}" '
        f'fill="{LABEL_COLOR}">{escape(label.text)}</text>'
    )


def path_data(series: SeriesPath) -> str:
    """Return the ``d`` attribute for a series, empty when it has no points."""
    return " ".join(
        f"{command}{_fmt(x)},{_fmt(y)}" for command, x, y in series.geometry.commands()
    )


def _series(series: SeriesPath) -> str:
    dash = (
        f' stroke-dasharray="{escape(series.style.dasharray)}"'
        if series.style.dasharray
        else ""
    )
    return (
        f'<path d="{path_data(series)}" fill="none" '
        f'stroke="{escape(series.style.color)}" '
        f'stroke-width="{_fmt(series.style.width)}"{dash} '
        'stroke-linecap="round" stroke-linejoin="round"/>'
    )


def _legend_item(item: LegendItem) -> str:
    dash = (
        f' stroke-dasharray="{escape(item.style.dasharray)}"'
        if item.style.dasharray
        else ""
    )
    return (
        "<g>"
        f'<line x1="{_fmt(item.x)}" y1="{_fmt(item.y)}" '
        f'x2="{_fmt(item.x + item.swatch_length)}" y2="{_fmt(item.y)}" '
        f'stroke="{escape(item.style.color)}" stroke-width="{LEGEND_STROKE_WIDTH}"{dash}/>'
        f'<text x="{_fmt(item.x + item.text_offset)}" y="{_fmt(item.y + 4)}" '
        f'font-size="{LABEL_FONT_SIZE}" fill="{LEGEND_TEXT_COLOR}">'
        f"{escape(item.label)}</text>"
        "</g>"
    )


def render_chart_svg(drawing: ChartDrawing) -> str:
    width = _fmt(drawing.width)
    height = _fmt(drawing.height)

    parts: List[str] = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        'xmlns="http://www.w3.org/2000/svg">',
        f'<rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="{escape(drawing.background)}"/>',
    ]
    parts.extend(_line(line) for line in drawing.axes.grid_lines)
    parts.extend(_line(line) for line in drawing.axes.axis_lines)
    parts.extend(_label(label) for label in drawing.axes.labels)
    parts.extend(_series(series) for series in drawing.polylines)
    parts.extend(_legend_item(item) for item in drawing.legend)
    parts.append("</svg>")
    return "\n".join(parts)
