"""Full-screen page shown when Home Assistant cannot be reached."""

from datetime import datetime, timezone
from html import escape
from typing import Optional, Tuple

from power_terminal.application.models import DashboardConfig
from power_terminal.domain.entities.errors import (
    HomeAssistantError,
    HomeAssistantErrorType,
)
from power_terminal.shared import format_clock

from .dashboard_page import page_styles

ERROR_STYLES = """
    .container {
      width: %(width)dpx;
      height: %(height)dpx;
      padding: 32px;
      display: flex;
      flex-direction: column;
      justify-content: center;
      align-items: center;
      text-align: center;
    }
    .error-icon { font-size: 80px; margin-bottom: 24px; }
    .error-title { font-size: 48px; font-weight: 700; margin-bottom: 16px; color: #dc2626; }
    .error-detail { font-size: 24px; color: #666666; margin-bottom: 32px; max-width: 600px; }
    .error-time { font-size: 18px; color: #999999; }
"""


def error_message(error: HomeAssistantError) -> Tuple[str, str]:
    """Return the ``(title, detail)`` pair shown for an error category."""

    category = error.category
    if category is HomeAssistantErrorType.NETWORK:
        return "Connection Failed", "Unable to connect to Home Assistant"
    if category is HomeAssistantErrorType.AUTH:
        return "Authentication Failed", "Check your HA_TOKEN configuration"
    if category is HomeAssistantErrorType.NOT_FOUND:
        return "Entity Not Found", error.message
    if category is HomeAssistantErrorType.UNAVAILABLE:
        return "Data Unavailable", "Home Assistant data is currently unavailable"
    if category is HomeAssistantErrorType.TIMEOUT:
        return "Request Timeout", "Home Assistant is not responding"
    return "Error", error.message


def render_error_page(
    error: HomeAssistantError,
    config: DashboardConfig,
    now: Optional[datetime] = None,
) -> str:
    title, detail = error_message(error)
    time_str = format_clock(now or datetime.now(timezone.utc), config.tz)
    size = {"width": config.width, "height": config.height}
    styles = page_styles(config.width, config.height) + ERROR_STYLES % size

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width={config.width}, height={config.height}, initial-scale=1.0">
  <title>Power Terminal - Error</title>
  <style>{styles}</style>
</head>
<body>
  <div class="container">
    <div class="error-icon">⚠️</div>
    <h1 class="error-title">{escape(title)}</h1>
    <p class="error-detail">{escape(detail)}</p>
    <p class="error-time">{escape(time_str)}</p>
  </div>
</body>
</html>"""
