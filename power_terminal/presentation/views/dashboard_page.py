"""Full-screen dashboard document."""

from power_terminal.application.models import DashboardConfig
from power_terminal.domain.entities.chart import ChartDrawing
from power_terminal.domain.entities.energy import EnergyMetrics

from .metrics_bar import METRICS_STYLES, render_metrics_bar
from .svg_renderer import render_chart_svg

BASE_STYLES = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    html, body {
      width: %(width)dpx;
      height: %(height)dpx;
      overflow: hidden;
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
      background: #ffffff;
      color: #000000;
    }
"""

GRAPH_STYLES = """
    .container {
      width: %(width)dpx;
      height: %(height)dpx;
      display: flex;
      flex-direction: column;
    }
    .graph-container {
      flex: 1;
      display: flex;
      justify-content: center;
      align-items: center;
      padding: 16px;
    }
    .graph-container svg { max-width: 100%%; height: auto; }
"""


def page_styles(width: int, height: int) -> str:
    size = {"width": width, "height": height}
    return BASE_STYLES % size


def render_dashboard_page(
    metrics: EnergyMetrics, drawing: ChartDrawing, config: DashboardConfig
) -> str:
    size = {"width": config.width, "height": config.height}
    styles = page_styles(config.width, config.height) + GRAPH_STYLES % size + METRICS_STYLES

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width={config.width}, height={config.height}, initial-scale=1.0">
  <title>Power Terminal</title>
  <style>{styles}</style>
</head>
<body>
  <div class="container">
    {render_metrics_bar(metrics, config)}
    <div class="graph-container">
{render_chart_svg(drawing)}
    </div>
  </div>
</body>
</html>"""
