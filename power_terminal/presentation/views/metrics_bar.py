"""Top bar with the current readings and the clock."""

from dataclasses import dataclass
from html import escape
from typing import List, Optional

from power_terminal.application.models import DashboardConfig
from power_terminal.domain.entities.energy import EnergyMetrics
from power_terminal.domain.entities.styles import DisplayMode
from power_terminal.shared import format_percent, format_power, format_time

GREEN = "#22c55e"
ORANGE = "#f59e0b"
RED = "#ef4444"
BLUE = "#3b82f6"
GRID_IMPORT = "#10b981"
GREY = "#666666"
BLACK = "#000000"


@dataclass(frozen=True, slots=True)
class MetricItem:
    emoji: str
    label: str
    value: str
    color: str


def battery_color(soc: Optional[float]) -> str:
    if soc is None:
        return GREY
    if soc >= 60:
        return GREEN
    if soc >= 30:
        return ORANGE
    return RED


def solar_color(power: Optional[float]) -> str:
    return ORANGE if power is not None and power > 0 else GREY


def grid_color(power: Optional[float]) -> str:
    if power is None or power == 0:
        return GREY
    return GRID_IMPORT if power > 0 else RED


def car_color(switch: Optional[bool]) -> str:
    if switch is None:
        return GREY
    return GREEN if switch else RED


def get_metric_items(
    metrics: EnergyMetrics, mode: DisplayMode = DisplayMode.COLOR
) -> List[MetricItem]:
    """Build the five metric items; only ``color`` mode uses colours."""

    items = [
        MetricItem(
            "🔋", "Battery", format_percent(metrics.battery_soc),
            battery_color(metrics.battery_soc),
        ),
        MetricItem(
            "☀️", "Solar", format_power(metrics.pv_power), solar_color(metrics.pv_power)
        ),
        MetricItem("🏠", "House", format_power(metrics.house_consumption), BLUE),
        MetricItem(
            "⚡", "Grid", format_power(metrics.grid_power), grid_color(metrics.grid_power)
        ),
        MetricItem(
            "🚗", "Car", format_power(metrics.car_charger_power),
            car_color(metrics.car_charger_switch),
        ),
    ]
    if mode is not DisplayMode.COLOR:
        items = [
            MetricItem(item.emoji, item.label, item.value, BLACK) for item in items
        ]
    return items


def render_metrics_bar(metrics: EnergyMetrics, config: DashboardConfig) -> str:
    items_html = "".join(
        '<div class="metric-item" title="{label}">'
        '<span class="metric-emoji">{emoji}</span>'
        '<span class="metric-value" style="color: {color}">{value}</span>'
        "</div>".format(
            label=escape(item.label),
            emoji=item.emoji,
            color=item.color,
            value=escape(item.value),
        )
        for item in get_metric_items(metrics, config.mode)
    )
    time_str = format_time(metrics.timestamp, config.tz)
    return (
        '<div class="metrics-bar">'
        f'<div class="metrics-left">{items_html}</div>'
        f'<div class="metrics-time">{escape(time_str)}</div>'
        "</div>"
    )


METRICS_STYLES = """
    .metrics-bar {
      display: flex;
      justify-content: space-between;
      align-items: center;
      padding: 16px 24px;
      background: #f8f8f8;
      border-bottom: 3px solid #000000;
    }
    .metrics-left { display: flex; gap: 20px; }
    .metric-item { display: flex; align-items: center; gap: 6px; }
    .metric-emoji { font-size: 24px; }
    .metric-value { font-size: 24px; font-weight: 700; }
    .metrics-time { font-size: 24px; font-weight: 600; color: #333333; }
"""
