"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from enum import Enum
from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ChartGeometryError(DomainError):
    """
    Raised when chart geometry receives a degenerate input.

    A zero-span value range, a zero-length time window, an empty plot area
    or a non-finite coordinate all mean an invariant upstream was broken.
    """


class HomeAssistantErrorType(str, Enum):
    """Failure categories surfaced by the backend gateway."""

    NETWORK = "network"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class HomeAssistantError(DomainError):
    """Raised when the Home Assistant backend cannot deliver data."""

    def __init__(
        self,
        category: HomeAssistantErrorType,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.category = category
        super().__init__(message, details)
