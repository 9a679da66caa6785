"""Axis range selection with "nice" rounded bounds."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from power_terminal.domain.entities.time_series import SamplePoint, ValueRange

MIN_AXIS_MAX = 1000.0
DEFAULT_RANGE = ValueRange(min=0.0, max=MIN_AXIS_MAX)

# (magnitude limit, step); anything above the last limit uses FALLBACK_STEP.
NICE_STEPS = ((2000.0, 500.0), (5000.0, 1000.0))
FALLBACK_STEP = 2000.0


def nice_step(magnitude: float) -> float:
    for limit, step in NICE_STEPS:
        if magnitude <= limit:
            return step
    return FALLBACK_STEP


def round_away_from_zero(value: float) -> float:
    """Round ``value`` away from zero to the step chosen by its magnitude."""
    magnitude = abs(value)
    step = nice_step(magnitude)
    rounded = math.ceil(magnitude / step) * step
    return -rounded if value < 0 else rounded


def calculate_range(series_list: Iterable[Sequence[SamplePoint]]) -> ValueRange:
    """
    Derive the shared value range for all series.

    Zero is always part of the pool so the range straddles it, the upper
    bound is at least 1000 W, and both bounds are rounded outwards. The lower
    bound is 0 unless some value is negative.
    """
    pool = [point.value for series in series_list for point in series]
    if not pool:
        return DEFAULT_RANGE

    raw_max = max(max(pool), 0.0, MIN_AXIS_MAX)
    raw_min = min(min(pool), 0.0)

    upper = round_away_from_zero(raw_max)
    lower = round_away_from_zero(raw_min) if raw_min < 0 else 0.0
    return ValueRange(min=lower, max=upper)
