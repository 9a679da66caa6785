"""
Dashboard Use Cases - Application Layer

Fetches current readings and 24 hours of history from Home Assistant and
turns the raw history into downsampled series for the graph.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional

from power_terminal.application.models import DashboardConfig
from power_terminal.domain.entities.energy import (
    DashboardData,
    EnergyEntities,
    EnergyHistory,
    EnergyMetrics,
    EntityState,
)
from power_terminal.domain.entities.styles import SeriesKey
from power_terminal.domain.entities.time_series import (
    HISTORY_WINDOW,
    HistoryEntry,
    SeriesHistory,
)
from power_terminal.domain.gateways.home_assistant_gateway import (
    IHomeAssistantGateway,
)
from power_terminal.domain.services.downsampler import downsample, parse_state_value
from power_terminal.shared import get_logger

logger = get_logger(__name__)


def parse_switch_state(state: EntityState) -> Optional[bool]:
    value = state.state.strip().lower()
    if value == "on":
        return True
    if value == "off":
        return False
    return None


class GetDashboardDataUseCase:
    """Use case for collecting everything the dashboard page shows."""

    def __init__(
        self,
        home_assistant_gateway: IHomeAssistantGateway,
        entities: EnergyEntities,
        dashboard_config: DashboardConfig,
    ) -> None:
        self._gateway = home_assistant_gateway
        self._entities = entities
        self._config = dashboard_config

    async def execute(self, now: Optional[datetime] = None) -> DashboardData:
        """
        Fetch current metrics and history concurrently.

        Args:
            now: Reference instant for the history window, defaults to the
                current UTC time

        Raises:
            HomeAssistantError: If any backend request fails
        """
        now = now or datetime.now(timezone.utc)
        logger.info("dashboard.fetch.started", now=now.isoformat())

        try:
            metrics, history = await asyncio.gather(
                self.fetch_metrics(now), self.fetch_history(now)
            )
        except Exception as e:
            logger.error("dashboard.fetch.failed", error=str(e), exc_info=e)
            raise

        logger.info(
            "dashboard.fetch.completed",
            points={key.value: len(series) for key, series in history.by_series().items()},
        )
        return DashboardData(metrics=metrics, history=history)

    async def fetch_metrics(self, now: datetime) -> EnergyMetrics:
        entities = self._entities
        (
            pv_state,
            battery_state,
            grid_state,
            house_state,
            car_state,
            car_switch_state,
        ) = await asyncio.gather(
            self._gateway.fetch_entity_state(entities.pv_power),
            self._gateway.fetch_entity_state(entities.battery_soc),
            self._gateway.fetch_entity_state(entities.grid_power),
            self._gateway.fetch_entity_state(entities.house_consumption),
            self._gateway.fetch_entity_state(entities.car_charger_power),
            self._gateway.fetch_entity_state(entities.car_charger_switch),
        )

        return EnergyMetrics(
            timestamp=now,
            pv_power=parse_state_value(pv_state.state),
            battery_soc=parse_state_value(battery_state.state),
            grid_power=parse_state_value(grid_state.state),
            house_consumption=parse_state_value(house_state.state),
            car_charger_power=parse_state_value(car_state.state),
            car_charger_switch=parse_switch_state(car_switch_state),
        )

    async def fetch_history(self, now: datetime) -> EnergyHistory:
        entity_ids = self._entities.history_entities
        raw = await self._gateway.fetch_entity_history(
            list(entity_ids.values()), now - HISTORY_WINDOW
        )

        # Minimal responses only name the entity on the first entry.
        by_entity: Dict[str, List[HistoryEntry]] = {}
        for entries in raw:
            if entries and entries[0].entity_id:
                by_entity[entries[0].entity_id] = entries

        series: Dict[SeriesKey, SeriesHistory] = {}
        for key, entity_id in entity_ids.items():
            entries = by_entity.get(entity_id, [])
            series[key] = tuple(downsample(entries, self._config.max_points))
            logger.debug(
                "dashboard.history.downsampled",
                series=key.value,
                raw=len(entries),
                points=len(series[key]),
            )

        return EnergyHistory(
            pv_power=series[SeriesKey.SOLAR],
            house_consumption=series[SeriesKey.HOUSE],
            grid_power=series[SeriesKey.GRID],
            car_charger_power=series[SeriesKey.CAR_CHARGER],
        )
