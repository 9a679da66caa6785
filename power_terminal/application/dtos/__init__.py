"""Data transfer objects returned by the HTTP endpoints."""

from .chart_dto import ChartDrawingDTO
from .dashboard_dto import EnergyMetricsDTO
from .error_dto import ErrorResponseDTO
from .health_dto import DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "ChartDrawingDTO",
    "EnergyMetricsDTO",
    "ErrorResponseDTO",
    "DependencyStatusDTO",
    "SystemHealthDTO",
]
