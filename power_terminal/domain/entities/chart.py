"""Pixel-space entities produced by the chart geometry engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from .errors import ChartGeometryError
from .styles import SeriesKey, StrokeStyle
from .time_series import TimeWindow, ValueRange


@dataclass(frozen=True, slots=True)
class Padding:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True, slots=True)
class PlotRect:
    """Graph canvas and the padded region inside it where data is drawn."""

    width: float
    height: float
    padding: Padding

    def __post_init__(self) -> None:
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ChartGeometryError(
                "Plot area must be positive after padding.",
                details={"width": self.width, "height": self.height},
            )

    @property
    def plot_width(self) -> float:
        return self.width - self.padding.left - self.padding.right

    @property
    def plot_height(self) -> float:
        return self.height - self.padding.top - self.padding.bottom

    @property
    def left(self) -> float:
        return self.padding.left

    @property
    def top(self) -> float:
        return self.padding.top

    @property
    def right(self) -> float:
        return self.width - self.padding.right

    @property
    def bottom(self) -> float:
        return self.height - self.padding.bottom


@dataclass(frozen=True, slots=True)
class PathGeometry:
    """Ordered pixel coordinates of one series polyline."""

    points: Tuple[Tuple[float, float], ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def commands(self) -> Iterator[Tuple[str, float, float]]:
        """Yield ``(command, x, y)`` with ``M`` for the first point, ``L`` after."""
        for index, (x, y) in enumerate(self.points):
            yield ("M" if index == 0 else "L", x, y)


class GridLineKind(str, Enum):
    GRID = "grid"
    ZERO = "zero"
    AXIS = "axis"


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class GridLine:
    x1: float
    y1: float
    x2: float
    y2: float
    orientation: Orientation
    kind: GridLineKind = GridLineKind.GRID


class TextAnchor(str, Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True, slots=True)
class AxisLabel:
    x: float
    y: float
    text: str
    anchor: TextAnchor


@dataclass(frozen=True, slots=True)
class AxisLayout:
    """
    Reference lines and labels for one render.

    ``zero_line`` is only set when zero falls between two horizontal
    gridlines; otherwise the matching horizontal gridline carries the
    ``ZERO`` kind itself.
    """

    vertical_lines: Tuple[GridLine, ...]
    horizontal_lines: Tuple[GridLine, ...]
    axis_lines: Tuple[GridLine, ...]
    labels: Tuple[AxisLabel, ...]
    zero_line: Optional[GridLine] = None

    @property
    def grid_lines(self) -> Tuple[GridLine, ...]:
        extra = (self.zero_line,) if self.zero_line is not None else ()
        return self.horizontal_lines + self.vertical_lines + extra


@dataclass(frozen=True, slots=True)
class SeriesPath:
    key: SeriesKey
    label: str
    style: StrokeStyle
    geometry: PathGeometry


@dataclass(frozen=True, slots=True)
class LegendItem:
    x: float
    y: float
    label: str
    style: StrokeStyle
    swatch_length: float = 24.0
    text_offset: float = 32.0


@dataclass(frozen=True, slots=True)
class ChartDrawing:
    """Complete drawing descriptor for the power graph."""

    width: float
    height: float
    background: str
    window: TimeWindow
    value_range: ValueRange
    axes: AxisLayout
    series: Tuple[SeriesPath, ...] = field(default_factory=tuple)
    legend: Tuple[LegendItem, ...] = field(default_factory=tuple)

    @property
    def polylines(self) -> Tuple[SeriesPath, ...]:
        """Series that actually have in-window points."""
        return tuple(item for item in self.series if not item.geometry.is_empty)


def ensure_finite(value: float, name: str = "value") -> float:
    """Return ``value`` unchanged, rejecting NaN and infinities."""
    if not math.isfinite(value):
        raise ChartGeometryError(
            f"Non-finite {name} cannot be serialized.", details={name: value}
        )
    return value
