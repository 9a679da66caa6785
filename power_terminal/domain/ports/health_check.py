"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from power_terminal.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving system health information."""

    async def evaluate(self) -> SystemHealth:
        """Check the backend and aggregate the result."""
        ...
