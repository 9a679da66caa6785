"""
Use Cases Package - Application Layer

Use cases orchestrate the flow of data between the gateways and the domain
services.
"""

from .chart_use_cases import BuildPowerChartUseCase
from .dashboard_use_cases import GetDashboardDataUseCase
from .health_use_cases import GetHealthStatusUseCase

__all__ = [
    "BuildPowerChartUseCase",
    "GetDashboardDataUseCase",
    "GetHealthStatusUseCase",
]
