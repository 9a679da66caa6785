from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from power_terminal.application.models import DashboardConfig  # noqa: E402
from power_terminal.domain.entities.chart import PlotRect  # noqa: E402
from power_terminal.domain.entities.energy import EnergyEntities  # noqa: E402
from power_terminal.domain.entities.time_series import (  # noqa: E402
    HistoryEntry,
    SamplePoint,
    TimeWindow,
)

FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def home_assistant_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HA_URL", "http://homeassistant.local:8123")
    monkeypatch.setenv("HA_TOKEN", "test-token")
    for key in (
        "HA_TOKEN_FILE",
        "HA_TIMEOUT",
        "TZ",
        "DISPLAY_TIMEZONE",
        "DISPLAY_MODE",
        "DISPLAY_WIDTH",
        "DISPLAY_HEIGHT",
        "CHART_MAX_POINTS",
        "ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_FILE_PATH",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def dashboard_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture()
def plot_rect(dashboard_config: DashboardConfig) -> PlotRect:
    return dashboard_config.plot_rect


@pytest.fixture()
def window(fixed_now: datetime) -> TimeWindow:
    return TimeWindow.ending_at(fixed_now)


@pytest.fixture()
def energy_entities() -> EnergyEntities:
    return EnergyEntities(
        pv_power="sensor.pv_power",
        battery_soc="sensor.battery_state_of_charge",
        grid_power="sensor.active_power",
        house_consumption="sensor.house_consumption",
        car_charger_power="sensor.car_charger_power",
        car_charger_switch="switch.car_charger",
    )


@pytest.fixture()
def make_entries(
    fixed_now: datetime,
) -> Callable[..., List[HistoryEntry]]:
    """Build raw history ending at ``fixed_now``, one reading per ``step``."""

    def _make(
        states: Sequence[object],
        step: timedelta = timedelta(minutes=1),
        entity_id: Optional[str] = None,
    ) -> List[HistoryEntry]:
        start = fixed_now - step * len(states)
        return [
            HistoryEntry(
                state=str(state),
                last_changed=start + step * (index + 1),
                entity_id=entity_id if index == 0 else None,
            )
            for index, state in enumerate(states)
        ]

    return _make


@pytest.fixture()
def make_points(
    fixed_now: datetime,
) -> Callable[..., tuple[SamplePoint, ...]]:
    def _make(
        values: Sequence[float], step: timedelta = timedelta(hours=1)
    ) -> tuple[SamplePoint, ...]:
        start = fixed_now - step * len(values)
        return tuple(
            SamplePoint(timestamp=start + step * (index + 1), value=float(value))
            for index, value in enumerate(values)
        )

    return _make
