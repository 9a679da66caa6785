"""Series identities and the stroke style table per display mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class DisplayMode(str, Enum):
    COLOR = "color"
    GRAYSCALE = "grayscale"
    MONOCHROME = "monochrome"


class SeriesKey(str, Enum):
    SOLAR = "solar"
    HOUSE = "house"
    GRID = "grid"
    CAR_CHARGER = "car_charger"


SERIES_LABELS: Mapping[SeriesKey, str] = MappingProxyType(
    {
        SeriesKey.SOLAR: "Solar",
        SeriesKey.HOUSE: "House",
        SeriesKey.GRID: "Grid",
        SeriesKey.CAR_CHARGER: "Car",
    }
)


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    color: str
    width: float = 2.5
    dasharray: Optional[str] = None


_BLACK = "#000000"

STROKE_STYLES: Mapping[DisplayMode, Mapping[SeriesKey, StrokeStyle]] = MappingProxyType(
    {
        DisplayMode.COLOR: MappingProxyType(
            {
                SeriesKey.SOLAR: StrokeStyle("#f59e0b"),
                SeriesKey.HOUSE: StrokeStyle("#3b82f6"),
                SeriesKey.GRID: StrokeStyle("#10b981"),
                SeriesKey.CAR_CHARGER: StrokeStyle("#8b5cf6"),
            }
        ),
        DisplayMode.GRAYSCALE: MappingProxyType(
            {
                SeriesKey.SOLAR: StrokeStyle(_BLACK),
                SeriesKey.HOUSE: StrokeStyle("#555555"),
                SeriesKey.GRID: StrokeStyle("#888888"),
                SeriesKey.CAR_CHARGER: StrokeStyle("#bbbbbb"),
            }
        ),
        DisplayMode.MONOCHROME: MappingProxyType(
            {
                SeriesKey.SOLAR: StrokeStyle(_BLACK),
                SeriesKey.HOUSE: StrokeStyle(_BLACK, dasharray="8 4"),
                SeriesKey.GRID: StrokeStyle(_BLACK, dasharray="2 3"),
                SeriesKey.CAR_CHARGER: StrokeStyle(_BLACK, dasharray="12 4 2 4"),
            }
        ),
    }
)


def stroke_style_for(mode: DisplayMode, key: SeriesKey) -> StrokeStyle:
    return STROKE_STYLES[mode][key]
