"""HTML and SVG rendering of the dashboard."""

from .dashboard_page import render_dashboard_page
from .error_page import error_message, render_error_page
from .metrics_bar import MetricItem, get_metric_items, render_metrics_bar
from .svg_renderer import render_chart_svg

__all__ = [
    "MetricItem",
    "error_message",
    "get_metric_items",
    "render_chart_svg",
    "render_dashboard_page",
    "render_error_page",
    "render_metrics_bar",
]
