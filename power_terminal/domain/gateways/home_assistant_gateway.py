"""
Domain Gateway - Home Assistant

This module defines the gateway interface for reading current states and
recorded history from the Home Assistant REST API.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Sequence

from power_terminal.domain.entities.energy import EntityState
from power_terminal.domain.entities.time_series import HistoryEntry


class IHomeAssistantGateway(ABC):
    """Interface for the Home Assistant gateway."""

    @abstractmethod
    async def fetch_entity_state(self, entity_id: str) -> EntityState:
        """
        Fetch the current state of one entity.

        Args:
            entity_id: Entity to read (e.g., "sensor.pv_power")

        Returns:
            The entity's current state

        Raises:
            HomeAssistantError: When the request fails or the entity is unknown
        """
        pass

    @abstractmethod
    async def fetch_entity_history(
        self, entity_ids: Sequence[str], start: datetime
    ) -> List[List[HistoryEntry]]:
        """
        Fetch recorded history for several entities since ``start``.

        Args:
            entity_ids: Entities to include
            start: Beginning of the period (timezone-aware)

        Returns:
            One chronological list per entity that has history. Only the
            first entry of each list carries ``entity_id``.

        Raises:
            HomeAssistantError: When the request fails
        """
        pass

    @abstractmethod
    async def ping(self) -> int:
        """
        Hit the API root and return the HTTP status code.

        Raises:
            HomeAssistantError: When the backend cannot be reached
        """
        pass
