from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from power_terminal.shared.formatting import (
    format_clock,
    format_date,
    format_percent,
    format_power,
    format_short_time,
    format_time,
)


@pytest.mark.parametrize(
    ("watts", "expected"),
    [
        (None, "—"),
        (0, "0W"),
        (850, "850W"),
        (849.5, "850W"),
        (999.4, "999W"),
        (1000, "1.0kW"),
        (3200, "3.2kW"),
        (12460, "12.5kW"),
        (-850, "-850W"),
        (-3200, "-3.2kW"),
        (-0.3, "0W"),
    ],
)
def test_format_power(watts, expected) -> None:
    assert format_power(watts) == expected


def test_format_percent_rounds_half_up() -> None:
    assert format_percent(76.5) == "77%"
    assert format_percent(None) == "—"


def test_time_formats_follow_timezone() -> None:
    moment = datetime(2026, 10, 18, 12, 5, tzinfo=timezone.utc)
    berlin = ZoneInfo("Europe/Berlin")

    assert format_time(moment, berlin) == "14:05"
    assert format_clock(moment, berlin) == "02:05 PM"
    assert format_short_time(moment, berlin) == "2 PM"
    assert format_date(moment, berlin) == "Sunday, October 18, 2026"


def test_short_time_midnight_and_noon() -> None:
    assert format_short_time(datetime(2026, 10, 18, 0, 0, tzinfo=timezone.utc), timezone.utc) == "12 AM"
    assert format_short_time(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc), timezone.utc) == "12 PM"
