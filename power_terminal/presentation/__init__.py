"""
Presentation Layer Package

This package contains the presentation layer components: FastAPI
controllers and the HTML/SVG views they render.
"""

from power_terminal.presentation import controllers, views

__all__ = ["controllers", "views"]
