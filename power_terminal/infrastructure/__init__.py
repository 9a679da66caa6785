"""
Infrastructure Layer Package

Implementations of the interfaces defined in the domain layer, dealing with
external concerns such as the Home Assistant HTTP API.
"""

from power_terminal.infrastructure import gateways, services

__all__ = ["gateways", "services"]
