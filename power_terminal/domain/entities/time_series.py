"""Domain entities for sensor history and the visible time/value domain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from .errors import ChartGeometryError

HISTORY_WINDOW = timedelta(hours=24)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """
    One raw reading as returned by the backend history API.

    ``state`` is kept as text: it can be a number, ``unavailable``,
    ``unknown`` or anything else the sensor reports. ``entity_id`` is only
    present on the first entry of a minimal-response list.
    """

    state: str
    last_changed: datetime
    entity_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SamplePoint:
    """A single observed or aggregated reading."""

    timestamp: datetime
    value: float


SeriesHistory = Tuple[SamplePoint, ...]


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Visible time domain shared by every series."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ChartGeometryError(
                "Time window must have a positive duration.",
                details={"start": self.start.isoformat(), "end": self.end.isoformat()},
            )

    @classmethod
    def ending_at(
        cls, end: datetime, duration: timedelta = HISTORY_WINDOW
    ) -> "TimeWindow":
        return cls(start=end - duration, end=end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Vertical value domain; always straddles zero with a positive span."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max <= self.min:
            raise ChartGeometryError(
                "Value range must have a positive span.",
                details={"min": self.min, "max": self.max},
            )

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max
