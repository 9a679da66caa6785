"""
Gateways Package - Domain Layer

Interfaces for external service communication. Implementations live in the
infrastructure layer.
"""

from .home_assistant_gateway import IHomeAssistantGateway

__all__ = ["IHomeAssistantGateway"]
