"""
Gateways Package - Infrastructure Layer

Concrete implementations of the gateway interfaces defined in the domain
layer.
"""

from .home_assistant_gateway import HomeAssistantGateway

__all__ = ["HomeAssistantGateway"]
