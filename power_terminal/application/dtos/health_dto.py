"""DTOs for the system health response."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from power_terminal.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Result of probing one backend."""

    name: str = Field(description="Backend identifier, e.g. home_assistant")
    status: ServiceStatus = Field(description="up, degraded, down or unknown")
    message: Optional[str] = Field(default=None, description="Short probe outcome")
    checked_at: datetime = Field(description="When the probe ran")
    latency_ms: Optional[float] = Field(
        default=None, description="Round trip of the probe in milliseconds"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="HTTP status code or failure category of the probe",
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Worst status across all backends")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="One entry per probed backend"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[DependencyStatusDTO.from_domain(dep) for dep in health.dependencies],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "dependencies": [
                    {
                        "name": "home_assistant",
                        "status": "up",
                        "message": "HTTP 200",
                        "checked_at": "2026-10-18T12:00:00Z",
                        "latency_ms": 24.1,
                        "details": {"status_code": 200},
                    }
                ],
            }
        }
    }
