"""Domain entities for the energy readings shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .styles import SeriesKey
from .time_series import SeriesHistory


@dataclass(frozen=True, slots=True)
class EnergyEntities:
    """Backend entity ids for every tracked quantity."""

    pv_power: str
    battery_soc: str
    grid_power: str
    house_consumption: str
    car_charger_power: str
    car_charger_switch: str

    @property
    def history_entities(self) -> Dict[SeriesKey, str]:
        return {
            SeriesKey.SOLAR: self.pv_power,
            SeriesKey.HOUSE: self.house_consumption,
            SeriesKey.GRID: self.grid_power,
            SeriesKey.CAR_CHARGER: self.car_charger_power,
        }


@dataclass(frozen=True, slots=True)
class EntityState:
    """Current state of one backend entity."""

    entity_id: str
    state: str
    last_changed: Optional[datetime] = None
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class EnergyMetrics:
    """
    Current readings, in watts unless noted.

    ``grid_power`` is positive while importing and negative while exporting.
    Any reading may be ``None`` when the sensor is unavailable.
    """

    timestamp: datetime
    pv_power: Optional[float] = None
    battery_soc: Optional[float] = None
    grid_power: Optional[float] = None
    house_consumption: Optional[float] = None
    car_charger_power: Optional[float] = None
    car_charger_switch: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class EnergyHistory:
    pv_power: SeriesHistory = ()
    house_consumption: SeriesHistory = ()
    grid_power: SeriesHistory = ()
    car_charger_power: SeriesHistory = ()

    def by_series(self) -> Dict[SeriesKey, SeriesHistory]:
        """Series in drawing order."""
        return {
            SeriesKey.SOLAR: self.pv_power,
            SeriesKey.HOUSE: self.house_consumption,
            SeriesKey.GRID: self.grid_power,
            SeriesKey.CAR_CHARGER: self.car_charger_power,
        }

    def all_series(self) -> Tuple[SeriesHistory, ...]:
        return tuple(self.by_series().values())


@dataclass(frozen=True, slots=True)
class DashboardData:
    metrics: EnergyMetrics
    history: EnergyHistory
