"""
Chart Use Cases - Application Layer

Runs the chart geometry pipeline: window, shared range, one path per
series, axes and legend.
"""

from datetime import datetime, timezone
from typing import Optional, Tuple

from power_terminal.application.models import DashboardConfig
from power_terminal.domain.entities.chart import ChartDrawing, LegendItem, SeriesPath
from power_terminal.domain.entities.energy import EnergyHistory
from power_terminal.domain.entities.styles import SERIES_LABELS, stroke_style_for
from power_terminal.domain.entities.time_series import TimeWindow
from power_terminal.domain.services import build_axes, build_path, calculate_range
from power_terminal.shared import get_logger

logger = get_logger(__name__)

BACKGROUND = "#ffffff"
LEGEND_ITEM_WIDTH = 100.0
LEGEND_BOTTOM_OFFSET = 15.0


class BuildPowerChartUseCase:
    """Use case producing the drawing descriptor of the 24-hour power graph."""

    def __init__(self, dashboard_config: DashboardConfig) -> None:
        self._config = dashboard_config

    def execute(
        self, history: EnergyHistory, now: Optional[datetime] = None
    ) -> ChartDrawing:
        window = TimeWindow.ending_at(now or datetime.now(timezone.utc))
        rect = self._config.plot_rect
        value_range = calculate_range(history.all_series())

        series = tuple(
            SeriesPath(
                key=key,
                label=SERIES_LABELS[key],
                style=stroke_style_for(self._config.mode, key),
                geometry=build_path(points, window, value_range, rect),
            )
            for key, points in history.by_series().items()
        )

        drawing = ChartDrawing(
            width=rect.width,
            height=rect.height,
            background=BACKGROUND,
            window=window,
            value_range=value_range,
            axes=build_axes(window, value_range, rect, self._config.tz),
            series=series,
            legend=self._legend(series, rect.width, rect.height),
        )

        logger.debug(
            "chart.built",
            range_min=value_range.min,
            range_max=value_range.max,
            polylines=len(drawing.polylines),
            mode=self._config.mode.value,
        )
        return drawing

    def _legend(
        self, series: Tuple[SeriesPath, ...], width: float, height: float
    ) -> Tuple[LegendItem, ...]:
        start_x = width / 2 - (len(series) * LEGEND_ITEM_WIDTH) / 2
        y = height - LEGEND_BOTTOM_OFFSET
        return tuple(
            LegendItem(
                x=start_x + index * LEGEND_ITEM_WIDTH,
                y=y,
                label=item.label,
                style=item.style,
            )
            for index, item in enumerate(series)
        )
