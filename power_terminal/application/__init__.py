"""
Application Layer

Use cases orchestrating the Home Assistant gateway and the chart geometry
services, plus the DTOs handed to the presentation layer.
"""
