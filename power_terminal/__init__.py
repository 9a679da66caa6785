"""
Power Terminal Root Module

This module serves as the root for the source code of the dashboard service.

Layer Structure:
- Domain: Time-series entities and the chart geometry engine
- Application: Use cases, DTOs and dashboard configuration
- Infrastructure: Home Assistant gateway and health checks
- Presentation: Controllers and SVG/HTML views
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""

__version__ = "1.0.0"
