from __future__ import annotations

from datetime import timezone
from zoneinfo import ZoneInfo

import pytest

from power_terminal.domain.entities.chart import GridLineKind, Orientation, TextAnchor
from power_terminal.domain.entities.time_series import ValueRange
from power_terminal.domain.services.axis_generator import build_axes


def test_time_axis_has_seven_labelled_lines(window, plot_rect) -> None:
    axes = build_axes(window, ValueRange(0.0, 1000.0), plot_rect, timezone.utc)

    assert len(axes.vertical_lines) == 7
    xs = [line.x1 for line in axes.vertical_lines]
    assert xs[0] == plot_rect.left
    assert xs[-1] == pytest.approx(plot_rect.right)
    assert all(line.orientation is Orientation.VERTICAL for line in axes.vertical_lines)

    time_labels = [label for label in axes.labels if label.anchor is TextAnchor.MIDDLE]
    assert [label.text for label in time_labels] == [
        "12 PM", "4 PM", "8 PM", "12 AM", "4 AM", "8 AM", "12 PM",
    ]
    assert all(label.y == plot_rect.bottom + 25 for label in time_labels)


def test_time_labels_use_configured_timezone(window, plot_rect) -> None:
    axes = build_axes(
        window, ValueRange(0.0, 1000.0), plot_rect, ZoneInfo("Europe/Berlin")
    )

    time_labels = [label.text for label in axes.labels if label.anchor is TextAnchor.MIDDLE]
    assert time_labels[0] == "2 PM"


def test_value_axis_has_six_lines_and_zero_kind(window, plot_rect) -> None:
    axes = build_axes(window, ValueRange(-500.0, 2000.0), plot_rect, timezone.utc)

    assert len(axes.horizontal_lines) == 6
    value_labels = [label for label in axes.labels if label.anchor is TextAnchor.END]
    assert [label.text for label in value_labels] == [
        "-500W", "0W", "500W", "1.0kW", "1.5kW", "2.0kW",
    ]
    assert all(label.x == plot_rect.left - 8 for label in value_labels)

    zero = axes.horizontal_lines[1]
    assert zero.kind is GridLineKind.ZERO
    assert zero.y1 == pytest.approx(268.0)
    assert axes.zero_line is None


def test_zero_line_added_between_gridlines(window, plot_rect) -> None:
    axes = build_axes(window, ValueRange(-1000.0, 5000.0), plot_rect, timezone.utc)

    assert all(line.kind is GridLineKind.GRID for line in axes.horizontal_lines)
    assert axes.zero_line is not None
    assert axes.zero_line.kind is GridLineKind.ZERO
    assert axes.zero_line.y1 == pytest.approx(20 + 310 * (1 - 1000 / 6000))
    assert axes.zero_line in axes.grid_lines


def test_default_range_marks_baseline_as_zero(window, plot_rect) -> None:
    axes = build_axes(window, ValueRange(0.0, 1000.0), plot_rect, timezone.utc)

    assert axes.horizontal_lines[0].kind is GridLineKind.ZERO
    assert axes.horizontal_lines[0].y1 == pytest.approx(plot_rect.bottom)


def test_axis_lines_frame_the_plot(window, plot_rect) -> None:
    axes = build_axes(window, ValueRange(0.0, 1000.0), plot_rect, timezone.utc)

    y_axis, x_axis = axes.axis_lines
    assert all(line.kind is GridLineKind.AXIS for line in axes.axis_lines)
    assert (y_axis.x1, y_axis.y1, y_axis.x2, y_axis.y2) == (60, 20, 60, 330)
    assert (x_axis.x1, x_axis.y1, x_axis.x2, x_axis.y2) == (60, 330, 740, 330)
