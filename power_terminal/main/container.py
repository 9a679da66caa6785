"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from power_terminal.application.models import DashboardConfig
from power_terminal.application.use_cases.chart_use_cases import (
    BuildPowerChartUseCase,
)
from power_terminal.application.use_cases.dashboard_use_cases import (
    GetDashboardDataUseCase,
)
from power_terminal.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from power_terminal.domain.entities.energy import EnergyEntities
from power_terminal.infrastructure.gateways.home_assistant_gateway import (
    HomeAssistantGateway,
)
from power_terminal.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from power_terminal.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    dashboard_config = providers.Singleton(
        DashboardConfig,
        width=config.display.width,
        height=config.display.height,
        mode=config.display.mode,
        timezone=config.display.timezone,
        max_points=config.chart.max_points,
    )

    energy_entities = providers.Singleton(
        EnergyEntities,
        pv_power=config.entities.pv_power,
        battery_soc=config.entities.battery_soc,
        grid_power=config.entities.grid_power,
        house_consumption=config.entities.house_consumption,
        car_charger_power=config.entities.car_charger_power,
        car_charger_switch=config.entities.car_charger_switch,
    )

    # Gateways
    home_assistant_gateway = providers.Singleton(
        HomeAssistantGateway,
        base_url=config.home_assistant.url,
        token=config.home_assistant.token,
        timeout=config.home_assistant.timeout,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        home_assistant_gateway=home_assistant_gateway,
    )

    # Application (use cases)
    get_dashboard_data_use_case = providers.Factory(
        GetDashboardDataUseCase,
        home_assistant_gateway=home_assistant_gateway,
        entities=energy_entities,
        dashboard_config=dashboard_config,
    )

    build_power_chart_use_case = providers.Factory(
        BuildPowerChartUseCase,
        dashboard_config=dashboard_config,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


def init_container(settings: AppSettings) -> AppContainer:
    """Build a container configured from application settings."""

    container = AppContainer()
    container.config.from_pydantic(settings)
    logger.info(
        "container.initialized",
        home_assistant_url=settings.home_assistant.url,
        display_mode=settings.display.mode.value,
    )
    return container

