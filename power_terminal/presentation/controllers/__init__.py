"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle HTTP
requests and responses, mapping use case results to HTML, SVG or JSON.
"""

from .dashboard_controller import router as dashboard_router
from .system_controller import router as system_router

__all__ = ["dashboard_router", "system_router"]
