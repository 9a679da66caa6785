"""DTOs for the current energy readings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from power_terminal.domain.entities.energy import EnergyMetrics


class EnergyMetricsDTO(BaseModel):
    """DTO representing the /api/metrics response payload."""

    timestamp: datetime = Field(description="When the readings were fetched")
    pv_power: Optional[float] = Field(default=None, description="Solar production in W")
    battery_soc: Optional[float] = Field(
        default=None, description="Battery state of charge in %"
    )
    grid_power: Optional[float] = Field(
        default=None, description="Grid power in W, negative while exporting"
    )
    house_consumption: Optional[float] = Field(
        default=None, description="House consumption in W"
    )
    car_charger_power: Optional[float] = Field(
        default=None, description="Car charger power in W"
    )
    car_charger_switch: Optional[bool] = Field(
        default=None, description="Whether the car charger is switched on"
    )

    @classmethod
    def from_domain(cls, metrics: EnergyMetrics) -> "EnergyMetricsDTO":
        return cls(
            timestamp=metrics.timestamp,
            pv_power=metrics.pv_power,
            battery_soc=metrics.battery_soc,
            grid_power=metrics.grid_power,
            house_consumption=metrics.house_consumption,
            car_charger_power=metrics.car_charger_power,
            car_charger_switch=metrics.car_charger_switch,
        )

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "timestamp": "2026-10-18T12:00:00Z",
                "pv_power": 3200.0,
                "battery_soc": 76.0,
                "grid_power": -850.0,
                "house_consumption": 1400.0,
                "car_charger_power": None,
                "car_charger_switch": False,
            }
        },
    )
