"""Human-readable formatting for power values and timestamps."""

from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Optional

from power_terminal.shared.consts import PLACEHOLDER


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_power(watts: Optional[float]) -> str:
    """
    Format a power reading.

    ``>= 1000`` W renders as kW with one decimal (``3.2kW``), anything below
    as whole watts (``850W``). Negative values keep a leading ``-``.
    """
    if watts is None:
        return PLACEHOLDER

    abs_watts = abs(watts)
    sign = "-" if watts < 0 else ""

    if abs_watts >= 1000:
        return f"{sign}{abs_watts / 1000:.1f}kW"

    rounded = _round_half_up(abs_watts)
    if rounded == 0:
        sign = ""
    return f"{sign}{rounded}W"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{_round_half_up(value)}%"


def format_time(moment: datetime, tz: tzinfo) -> str:
    """24-hour ``HH:MM`` in the given timezone."""
    return moment.astimezone(tz).strftime("%H:%M")


def format_date(moment: datetime, tz: tzinfo) -> str:
    """Long date, e.g. ``Sunday, October 18, 2026``."""
    local = moment.astimezone(tz)
    return f"{local.strftime('%A, %B')} {local.day}, {local.year}"


def format_clock(moment: datetime, tz: tzinfo) -> str:
    """12-hour ``HH:MM AM`` clock."""
    return moment.astimezone(tz).strftime("%I:%M %p")


def format_short_time(moment: datetime, tz: tzinfo) -> str:
    """Hour-only axis label, e.g. ``2 PM`` or ``12 AM``."""
    local = moment.astimezone(tz)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour} {suffix}"
