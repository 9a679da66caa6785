from __future__ import annotations

from dataclasses import dataclass

import pytest

from power_terminal.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from power_terminal.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


@dataclass
class _StubHealthService:
    health: SystemHealth

    async def evaluate(self) -> SystemHealth:
        return self.health


@pytest.mark.asyncio
async def test_get_health_status_use_case_returns_dto() -> None:
    health = SystemHealth(
        status=ServiceStatus.DEGRADED,
        dependencies=[
            DependencyStatus(
                name="home_assistant",
                status=ServiceStatus.DEGRADED,
                details={"status_code": 401},
            )
        ],
    )

    use_case = GetHealthStatusUseCase(health_check_service=_StubHealthService(health))

    dto = await use_case.execute()

    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[0].name == "home_assistant"
    assert dto.dependencies[0].details == {"status_code": 401}
