from __future__ import annotations

import pytest

from power_terminal.domain.entities.errors import (
    HomeAssistantError,
    HomeAssistantErrorType,
)
from power_terminal.domain.entities.health import ServiceStatus
from power_terminal.infrastructure.services.health_check_service import (
    HealthCheckService,
)


class _StubGateway:
    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self._status_code = status_code
        self._error = error

    async def ping(self) -> int:
        if self._error is not None:
            raise self._error
        return self._status_code


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (200, ServiceStatus.UP),
        (401, ServiceStatus.DEGRADED),
        (503, ServiceStatus.DOWN),
    ],
)
async def test_status_code_maps_to_service_status(status_code, expected) -> None:
    service = HealthCheckService(home_assistant_gateway=_StubGateway(status_code))

    health = await service.evaluate()

    assert health.status is expected
    dependency = health.dependencies[0]
    assert dependency.name == "home_assistant"
    assert dependency.status is expected
    assert dependency.latency_ms is not None


@pytest.mark.asyncio
async def test_unreachable_backend_is_down() -> None:
    error = HomeAssistantError(
        HomeAssistantErrorType.NETWORK, "Unable to connect to Home Assistant"
    )
    service = HealthCheckService(home_assistant_gateway=_StubGateway(error=error))

    health = await service.evaluate()

    assert health.status is ServiceStatus.DOWN
    assert health.dependencies[0].details == {"category": "network"}
    assert health.dependencies[0].message == "Unable to connect to Home Assistant"
