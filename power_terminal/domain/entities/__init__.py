"""
Domain Entities Package

This package contains the core domain entities: sensor history, chart
geometry, energy readings, stroke styles, health and errors.
"""

from .chart import (
    AxisLabel,
    AxisLayout,
    ChartDrawing,
    GridLine,
    GridLineKind,
    LegendItem,
    Orientation,
    Padding,
    PathGeometry,
    PlotRect,
    SeriesPath,
    TextAnchor,
    ensure_finite,
)
from .energy import (
    DashboardData,
    EnergyEntities,
    EnergyHistory,
    EnergyMetrics,
    EntityState,
)
from .errors import (
    ChartGeometryError,
    DomainError,
    HomeAssistantError,
    HomeAssistantErrorType,
)
from .health import DependencyStatus, ServiceStatus, SystemHealth
from .styles import (
    SERIES_LABELS,
    DisplayMode,
    SeriesKey,
    StrokeStyle,
    stroke_style_for,
)
from .time_series import (
    HISTORY_WINDOW,
    HistoryEntry,
    SamplePoint,
    SeriesHistory,
    TimeWindow,
    ValueRange,
)

__all__ = [
    "AxisLabel",
    "AxisLayout",
    "ChartDrawing",
    "GridLine",
    "GridLineKind",
    "LegendItem",
    "Orientation",
    "Padding",
    "PathGeometry",
    "PlotRect",
    "SeriesPath",
    "TextAnchor",
    "ensure_finite",
    "DashboardData",
    "EnergyEntities",
    "EnergyHistory",
    "EnergyMetrics",
    "EntityState",
    "ChartGeometryError",
    "DomainError",
    "HomeAssistantError",
    "HomeAssistantErrorType",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "SERIES_LABELS",
    "DisplayMode",
    "SeriesKey",
    "StrokeStyle",
    "stroke_style_for",
    "HISTORY_WINDOW",
    "HistoryEntry",
    "SamplePoint",
    "SeriesHistory",
    "TimeWindow",
    "ValueRange",
]
