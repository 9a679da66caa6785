"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application:
- Environment and log level enums
- structlog configuration
- Formatting of power values and timestamps

It must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .formatting import (
    format_clock,
    format_date,
    format_percent,
    format_power,
    format_short_time,
    format_time,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
    "format_power",
    "format_percent",
    "format_time",
    "format_date",
    "format_clock",
    "format_short_time",
]
