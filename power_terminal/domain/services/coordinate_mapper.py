"""Linear mapping from time/value space into plot pixels."""

from __future__ import annotations

from datetime import datetime

from power_terminal.domain.entities.chart import PlotRect
from power_terminal.domain.entities.errors import ChartGeometryError
from power_terminal.domain.entities.time_series import TimeWindow, ValueRange


def x_of(moment: datetime, window: TimeWindow, rect: PlotRect) -> float:
    """Horizontal pixel for ``moment``. Not clamped to the window."""
    total = window.end - window.start
    if total.total_seconds() <= 0:
        raise ChartGeometryError("Cannot map time onto a zero-length window.")
    return rect.left + ((moment - window.start) / total) * rect.plot_width


def y_of(value: float, value_range: ValueRange, rect: PlotRect) -> float:
    """Vertical pixel for ``value``; screen Y grows downward."""
    span = value_range.max - value_range.min
    if span <= 0:
        raise ChartGeometryError(
            "Cannot map values onto a zero-span range.",
            details={"min": value_range.min, "max": value_range.max},
        )
    normalized = (value - value_range.min) / span
    return rect.top + rect.plot_height * (1 - normalized)
