"""DTOs exposing the chart drawing descriptor as JSON."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from power_terminal.domain.entities.chart import (
    AxisLabel,
    ChartDrawing,
    GridLine,
    GridLineKind,
    LegendItem,
    Orientation,
    SeriesPath,
    TextAnchor,
    ensure_finite,
)
from power_terminal.domain.entities.styles import SeriesKey, StrokeStyle


class StrokeStyleDTO(BaseModel):
    color: str = Field(description="Stroke colour as #rrggbb")
    width: float = Field(description="Stroke width in pixels")
    dasharray: Optional[str] = Field(
        default=None, description="SVG dash pattern, absent for solid lines"
    )

    @classmethod
    def from_domain(cls, style: StrokeStyle) -> "StrokeStyleDTO":
        return cls(
            color=style.color,
            width=ensure_finite(style.width, "width"),
            dasharray=style.dasharray,
        )


class GridLineDTO(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    orientation: Orientation
    kind: GridLineKind

    @classmethod
    def from_domain(cls, line: GridLine) -> "GridLineDTO":
        return cls(
            x1=ensure_finite(line.x1, "x1"),
            y1=ensure_finite(line.y1, "y1"),
            x2=ensure_finite(line.x2, "x2"),
            y2=ensure_finite(line.y2, "y2"),
            orientation=line.orientation,
            kind=line.kind,
        )


class AxisLabelDTO(BaseModel):
    x: float
    y: float
    text: str
    anchor: TextAnchor

    @classmethod
    def from_domain(cls, label: AxisLabel) -> "AxisLabelDTO":
        return cls(
            x=ensure_finite(label.x, "x"),
            y=ensure_finite(label.y, "y"),
            text=label.text,
            anchor=label.anchor,
        )


class SeriesPathDTO(BaseModel):
    key: SeriesKey = Field(description="Series identifier")
    label: str = Field(description="Legend label")
    style: StrokeStyleDTO
    points: List[Tuple[float, float]] = Field(
        default_factory=list,
        description="Pixel coordinates in time order, empty when nothing is in window",
    )

    @classmethod
    def from_domain(cls, series: SeriesPath) -> "SeriesPathDTO":
        return cls(
            key=series.key,
            label=series.label,
            style=StrokeStyleDTO.from_domain(series.style),
            points=[
                (ensure_finite(x, "x"), ensure_finite(y, "y"))
                for x, y in series.geometry.points
            ],
        )


class LegendItemDTO(BaseModel):
    x: float
    y: float
    label: str
    style: StrokeStyleDTO

    @classmethod
    def from_domain(cls, item: LegendItem) -> "LegendItemDTO":
        return cls(
            x=ensure_finite(item.x, "x"),
            y=ensure_finite(item.y, "y"),
            label=item.label,
            style=StrokeStyleDTO.from_domain(item.style),
        )


class ChartDrawingDTO(BaseModel):
    """DTO representing the /api/chart response payload."""

    width: float = Field(description="Graph width in pixels")
    height: float = Field(description="Graph height in pixels")
    background: str = Field(description="Background colour")
    window_start: datetime = Field(description="Left edge of the time axis")
    window_end: datetime = Field(description="Right edge of the time axis")
    range_min: float = Field(description="Value at the bottom of the plot, in W")
    range_max: float = Field(description="Value at the top of the plot, in W")
    grid_lines: List[GridLineDTO] = Field(default_factory=list)
    axis_lines: List[GridLineDTO] = Field(default_factory=list)
    labels: List[AxisLabelDTO] = Field(default_factory=list)
    series: List[SeriesPathDTO] = Field(default_factory=list)
    legend: List[LegendItemDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, drawing: ChartDrawing) -> "ChartDrawingDTO":
        return cls(
            width=ensure_finite(drawing.width, "width"),
            height=ensure_finite(drawing.height, "height"),
            background=drawing.background,
            window_start=drawing.window.start,
            window_end=drawing.window.end,
            range_min=ensure_finite(drawing.value_range.min, "range_min"),
            range_max=ensure_finite(drawing.value_range.max, "range_max"),
            grid_lines=[GridLineDTO.from_domain(line) for line in drawing.axes.grid_lines],
            axis_lines=[GridLineDTO.from_domain(line) for line in drawing.axes.axis_lines],
            labels=[AxisLabelDTO.from_domain(label) for label in drawing.axes.labels],
            series=[SeriesPathDTO.from_domain(item) for item in drawing.series],
            legend=[LegendItemDTO.from_domain(item) for item in drawing.legend],
        )

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "width": 760,
                "height": 380,
                "background": "#ffffff",
                "window_start": "2026-10-17T12:00:00Z",
                "window_end": "2026-10-18T12:00:00Z",
                "range_min": -500,
                "range_max": 2000,
                "grid_lines": [
                    {
                        "x1": 60,
                        "y1": 20,
                        "x2": 740,
                        "y2": 20,
                        "orientation": "horizontal",
                        "kind": "grid",
                    }
                ],
                "axis_lines": [],
                "labels": [{"x": 52, "y": 24, "text": "2.0kW", "anchor": "end"}],
                "series": [
                    {
                        "key": "solar",
                        "label": "Solar",
                        "style": {"color": "#f59e0b", "width": 2.5, "dasharray": None},
                        "points": [[60.0, 260.0], [62.4, 255.1]],
                    }
                ],
                "legend": [],
            }
        },
    )
