from __future__ import annotations

from power_terminal.application.dtos.dashboard_dto import EnergyMetricsDTO
from power_terminal.application.dtos.error_dto import ErrorResponseDTO
from power_terminal.domain.entities.energy import EnergyMetrics
from power_terminal.domain.entities.errors import (
    HomeAssistantError,
    HomeAssistantErrorType,
)


def test_metrics_dto_keeps_absent_readings(fixed_now) -> None:
    metrics = EnergyMetrics(
        timestamp=fixed_now, pv_power=3200.0, grid_power=-850.0, car_charger_switch=True
    )

    payload = EnergyMetricsDTO.from_domain(metrics).model_dump(mode="json")

    assert payload["pv_power"] == 3200.0
    assert payload["grid_power"] == -850.0
    assert payload["battery_soc"] is None
    assert payload["car_charger_switch"] is True
    assert payload["timestamp"].startswith("2026-10-18T12:00:00")


def test_error_dto_from_domain() -> None:
    error = HomeAssistantError(HomeAssistantErrorType.AUTH, "Authentication failed")

    payload = ErrorResponseDTO.from_domain(error).model_dump(mode="json")

    assert payload == {"detail": "Authentication failed", "category": "auth"}
