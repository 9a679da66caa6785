"""
Domain Layer Package

Core rules of the dashboard: time-series and chart entities, the chart
geometry services, and the contracts for external collaborators. Nothing
here depends on web frameworks or HTTP clients.
"""

from power_terminal.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
