"""Polyline construction for one series."""

from __future__ import annotations

from typing import Iterable

from power_terminal.domain.entities.chart import PathGeometry, PlotRect
from power_terminal.domain.entities.time_series import (
    SamplePoint,
    TimeWindow,
    ValueRange,
)

from .coordinate_mapper import x_of, y_of


def build_path(
    points: Iterable[SamplePoint],
    window: TimeWindow,
    value_range: ValueRange,
    rect: PlotRect,
) -> PathGeometry:
    """
    Map the in-window points of a series to pixel coordinates.

    Points outside ``[window.start, window.end]`` are dropped; a series with
    nothing left yields an empty geometry.
    """
    return PathGeometry(
        points=tuple(
            (x_of(point.timestamp, window, rect), y_of(point.value, value_range, rect))
            for point in points
            if window.contains(point.timestamp)
        )
    )
