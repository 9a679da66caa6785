"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from power_terminal.domain.entities.chart import Padding, PlotRect
from power_terminal.domain.entities.styles import DisplayMode
from power_terminal.domain.services.downsampler import DEFAULT_MAX_POINTS

GRAPH_PADDING = Padding(top=20, right=20, bottom=50, left=60)
GRAPH_MARGIN_X = 40  # graph container padding
GRAPH_MARGIN_Y = 100  # metrics bar plus container padding


@dataclass(frozen=True)
class DashboardConfig:
    """Display and chart parameters, fixed for the lifetime of the process."""

    width: int = 800
    height: int = 480
    mode: DisplayMode = DisplayMode.COLOR
    timezone: str = "UTC"
    max_points: int = DEFAULT_MAX_POINTS

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def plot_rect(self) -> PlotRect:
        return PlotRect(
            width=self.width - GRAPH_MARGIN_X,
            height=self.height - GRAPH_MARGIN_Y,
            padding=GRAPH_PADDING,
        )
