"""
Infrastructure Gateway - Home Assistant Implementation

This module implements the Home Assistant gateway over the REST API
(``/api/states`` and ``/api/history/period``) using httpx.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import httpx

from power_terminal.domain.entities.energy import EntityState
from power_terminal.domain.entities.errors import (
    HomeAssistantError,
    HomeAssistantErrorType,
)
from power_terminal.domain.entities.time_series import HistoryEntry
from power_terminal.domain.gateways.home_assistant_gateway import (
    IHomeAssistantGateway,
)
from power_terminal.shared import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _category_for_status(status_code: int) -> HomeAssistantErrorType:
    if status_code in (401, 403):
        return HomeAssistantErrorType.AUTH
    if status_code == 404:
        return HomeAssistantErrorType.NOT_FOUND
    return HomeAssistantErrorType.UNKNOWN


class HomeAssistantGateway(IHomeAssistantGateway):
    """Home Assistant REST client authenticated with a long-lived token."""

    def __init__(self, base_url: str, token: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the gateway.

        Args:
            base_url: Base URL of Home Assistant (e.g., "http://homeassistant:8123")
            token: Long-lived access token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }

    async def _get_json(
        self, endpoint: str, params: Optional[Dict[str, str]] = None
    ) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("home_assistant.request", url=url, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            category = _category_for_status(status_code)
            logger.error(
                "home_assistant.request.http_error",
                status_code=status_code,
                category=category.value,
                url=url,
            )
            if category is HomeAssistantErrorType.AUTH:
                message = "Authentication failed - check HA_TOKEN"
            elif category is HomeAssistantErrorType.NOT_FOUND:
                message = f"Endpoint not found: {endpoint}"
            else:
                message = f"Home Assistant returned status {status_code}"
            raise HomeAssistantError(
                category, message, details={"status_code": status_code}
            ) from e

        except httpx.TimeoutException as e:
            logger.error("home_assistant.request.timeout", url=url, error=str(e))
            raise HomeAssistantError(
                HomeAssistantErrorType.TIMEOUT,
                "Home Assistant not responding (timeout)",
            ) from e

        except httpx.RequestError as e:
            logger.error("home_assistant.request.network_error", url=url, error=str(e))
            raise HomeAssistantError(
                HomeAssistantErrorType.NETWORK,
                "Unable to connect to Home Assistant",
                details={"error": str(e)},
            ) from e

        except ValueError as e:
            logger.error("home_assistant.request.invalid_body", url=url, error=str(e))
            raise HomeAssistantError(
                HomeAssistantErrorType.UNKNOWN,
                f"Unexpected response from Home Assistant: {e}",
            ) from e

    async def fetch_entity_state(self, entity_id: str) -> EntityState:
        """Fetch the current state of an entity from ``/api/states``."""

        payload = await self._get_json(f"/api/states/{quote(entity_id, safe='')}")

        if not isinstance(payload, dict) or not payload.get("entity_id"):
            logger.warning("home_assistant.state.missing_entity", entity_id=entity_id)
            raise HomeAssistantError(
                HomeAssistantErrorType.NOT_FOUND, f"Entity not found: {entity_id}"
            )

        return EntityState(
            entity_id=payload["entity_id"],
            state=str(payload.get("state", "")),
            last_changed=_parse_timestamp(payload.get("last_changed")),
            attributes=payload.get("attributes") or {},
        )

    async def fetch_entity_history(
        self, entity_ids: Sequence[str], start: datetime
    ) -> List[List[HistoryEntry]]:
        """Fetch minimal-response history for ``entity_ids`` since ``start``."""

        start_iso = quote(start.astimezone(timezone.utc).isoformat(), safe="")
        params = {
            "filter_entity_id": ",".join(entity_ids),
            "minimal_response": "",
            "no_attributes": "",
        }

        logger.info(
            "home_assistant.history.requested",
            entity_ids=list(entity_ids),
            start=start.isoformat(),
        )
        payload = await self._get_json(f"/api/history/period/{start_iso}", params)

        if not isinstance(payload, list):
            raise HomeAssistantError(
                HomeAssistantErrorType.UNKNOWN,
                "Unexpected history payload from Home Assistant",
            )

        history = [self._parse_history_list(items) for items in payload]
        logger.info(
            "home_assistant.history.parsed",
            series=len(history),
            entries=sum(len(items) for items in history),
        )
        return history

    def _parse_history_list(self, items: Any) -> List[HistoryEntry]:
        entries: List[HistoryEntry] = []
        if not isinstance(items, list):
            return entries

        # Minimal responses only name the entity on the first raw entry.
        series_entity_id: Optional[str] = None
        for item in items:
            if not isinstance(item, dict):
                continue
            if series_entity_id is None and item.get("entity_id"):
                series_entity_id = item["entity_id"]
            last_changed = _parse_timestamp(item.get("last_changed"))
            if last_changed is None:
                logger.warning(
                    "home_assistant.history.invalid_timestamp",
                    entity_id=series_entity_id,
                    value=item.get("last_changed"),
                )
                continue
            state = item.get("state")
            entries.append(
                HistoryEntry(
                    state="" if state is None else str(state),
                    last_changed=last_changed,
                    entity_id=item.get("entity_id")
                    or (None if entries else series_entity_id),
                )
            )
        return entries

    async def ping(self) -> int:
        """Return the status code of ``GET /api/``."""

        url = f"{self.base_url}/api/"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=self._headers())
                return response.status_code

        except httpx.TimeoutException as e:
            raise HomeAssistantError(
                HomeAssistantErrorType.TIMEOUT,
                "Home Assistant not responding (timeout)",
            ) from e

        except httpx.RequestError as e:
            raise HomeAssistantError(
                HomeAssistantErrorType.NETWORK,
                "Unable to connect to Home Assistant",
                details={"error": str(e)},
            ) from e
