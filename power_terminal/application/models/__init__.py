"""Application-level configuration models."""

from .dashboard_config import DashboardConfig

__all__ = ["DashboardConfig"]
