"""Gridlines and axis labels, positioned from the window and range only."""

from __future__ import annotations

import math
from datetime import tzinfo
from typing import List, Optional

from power_terminal.domain.entities.chart import (
    AxisLabel,
    AxisLayout,
    GridLine,
    GridLineKind,
    Orientation,
    PlotRect,
    TextAnchor,
)
from power_terminal.domain.entities.time_series import TimeWindow, ValueRange
from power_terminal.shared.formatting import format_power, format_short_time

from .coordinate_mapper import x_of, y_of

TIME_DIVISIONS = 6  # 7 lines: every 4 hours over 24
VALUE_DIVISIONS = 5  # 6 lines including the baseline

TIME_LABEL_OFFSET = 25.0
VALUE_LABEL_GAP = 8.0
VALUE_LABEL_BASELINE = 4.0


def _is_zero(value: float) -> bool:
    return math.isclose(value, 0.0, abs_tol=1e-9)


def _time_axis(
    window: TimeWindow, rect: PlotRect, tz: tzinfo
) -> tuple[List[GridLine], List[AxisLabel]]:
    lines: List[GridLine] = []
    labels: List[AxisLabel] = []
    interval = window.duration / TIME_DIVISIONS

    for index in range(TIME_DIVISIONS + 1):
        moment = window.start + interval * index
        x = x_of(moment, window, rect)
        lines.append(GridLine(x, rect.top, x, rect.bottom, Orientation.VERTICAL))
        labels.append(
            AxisLabel(
                x=x,
                y=rect.bottom + TIME_LABEL_OFFSET,
                text=format_short_time(moment, tz),
                anchor=TextAnchor.MIDDLE,
            )
        )
    return lines, labels


def _value_axis(
    value_range: ValueRange, rect: PlotRect
) -> tuple[List[GridLine], List[AxisLabel]]:
    lines: List[GridLine] = []
    labels: List[AxisLabel] = []
    step = value_range.span / VALUE_DIVISIONS

    for index in range(VALUE_DIVISIONS + 1):
        value = value_range.min + step * index
        kind = GridLineKind.GRID
        if _is_zero(value):
            value = 0.0
            kind = GridLineKind.ZERO
        y = y_of(value, value_range, rect)
        lines.append(
            GridLine(rect.left, y, rect.right, y, Orientation.HORIZONTAL, kind)
        )
        labels.append(
            AxisLabel(
                x=rect.left - VALUE_LABEL_GAP,
                y=y + VALUE_LABEL_BASELINE,
                text=format_power(value),
                anchor=TextAnchor.END,
            )
        )
    return lines, labels


def _zero_line(
    horizontal: List[GridLine], value_range: ValueRange, rect: PlotRect
) -> Optional[GridLine]:
    if any(line.kind is GridLineKind.ZERO for line in horizontal):
        return None
    if not value_range.contains(0.0):
        return None
    y = y_of(0.0, value_range, rect)
    return GridLine(
        rect.left, y, rect.right, y, Orientation.HORIZONTAL, GridLineKind.ZERO
    )


def build_axes(
    window: TimeWindow, value_range: ValueRange, rect: PlotRect, tz: tzinfo
) -> AxisLayout:
    """
    Lay out the reference grid for one render.

    Seven vertical lines split the window into six equal parts, each labelled
    with its hour in ``tz``. Six horizontal lines split the value range into
    five, labelled in W/kW. The zero line is always emphasised.
    """
    vertical, time_labels = _time_axis(window, rect, tz)
    horizontal, value_labels = _value_axis(value_range, rect)

    axis_lines = (
        GridLine(
            rect.left, rect.top, rect.left, rect.bottom,
            Orientation.VERTICAL, GridLineKind.AXIS,
        ),
        GridLine(
            rect.left, rect.bottom, rect.right, rect.bottom,
            Orientation.HORIZONTAL, GridLineKind.AXIS,
        ),
    )

    return AxisLayout(
        vertical_lines=tuple(vertical),
        horizontal_lines=tuple(horizontal),
        axis_lines=axis_lines,
        labels=tuple(value_labels + time_labels),
        zero_line=_zero_line(horizontal, value_range, rect),
    )
