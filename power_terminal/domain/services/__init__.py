"""
Domain Services Package

Pure functions of the chart engine: downsampling, range selection,
coordinate mapping, polyline construction and axis layout.
"""

from .axis_generator import build_axes
from .coordinate_mapper import x_of, y_of
from .downsampler import DEFAULT_MAX_POINTS, downsample, parse_state_value
from .path_builder import build_path
from .range_calculator import DEFAULT_RANGE, calculate_range

__all__ = [
    "build_axes",
    "x_of",
    "y_of",
    "DEFAULT_MAX_POINTS",
    "downsample",
    "parse_state_value",
    "build_path",
    "DEFAULT_RANGE",
    "calculate_range",
]
