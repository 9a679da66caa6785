"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from time import perf_counter
from typing import Iterable, List

from power_terminal.domain.entities.errors import HomeAssistantError
from power_terminal.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from power_terminal.domain.gateways.home_assistant_gateway import (
    IHomeAssistantGateway,
)
from power_terminal.domain.ports.health_check import IHealthCheckService
from power_terminal.shared import get_logger

logger = get_logger(__name__)


class HealthCheckService(IHealthCheckService):
    """Report whether the Home Assistant API answers."""

    def __init__(self, home_assistant_gateway: IHomeAssistantGateway) -> None:
        self._gateway = home_assistant_gateway

    async def evaluate(self) -> SystemHealth:
        statuses: List[DependencyStatus] = [await self._check_home_assistant()]
        return SystemHealth(
            status=self._aggregate_status(statuses), dependencies=statuses
        )

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    async def _check_home_assistant(self) -> DependencyStatus:
        start = perf_counter()
        try:
            status_code = await self._gateway.ping()
        except HomeAssistantError as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning(
                "health.home_assistant.unreachable",
                category=exc.category.value,
                error=exc.message,
            )
            return DependencyStatus(
                name="home_assistant",
                status=ServiceStatus.DOWN,
                message=exc.message,
                latency_ms=latency_ms,
                details={"category": exc.category.value},
            )

        latency_ms = (perf_counter() - start) * 1000
        if status_code >= 500:
            status = ServiceStatus.DOWN
        elif status_code >= 400:
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP

        return DependencyStatus(
            name="home_assistant",
            status=status,
            message=f"HTTP {status_code}",
            latency_ms=latency_ms,
            details={"status_code": status_code},
        )
