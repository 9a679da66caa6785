"""Bucket-averaging downsampler for raw sensor history."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from power_terminal.domain.entities.time_series import HistoryEntry, SamplePoint
from power_terminal.shared.consts import UNAVAILABLE_STATES

DEFAULT_MAX_POINTS = 288  # one point per 5 minutes over 24 hours


def parse_state_value(state: Optional[str]) -> Optional[float]:
    """
    Parse a raw backend state into a finite float.

    Returns ``None`` for ``unavailable``, ``unknown``, empty, non-numeric and
    non-finite states.
    """
    if state is None:
        return None
    text = state.strip()
    if text.lower() in UNAVAILABLE_STATES:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_entries(entries: Iterable[HistoryEntry]) -> List[SamplePoint]:
    """Convert raw entries to sample points, dropping unreadable states."""
    points: List[SamplePoint] = []
    for entry in entries:
        value = parse_state_value(entry.state)
        if value is None:
            continue
        points.append(SamplePoint(timestamp=entry.last_changed, value=value))
    return points


def _average_buckets(points: Sequence[SamplePoint], bucket_size: int) -> List[SamplePoint]:
    total = len(points)
    starts = np.arange(0, total, bucket_size)
    lengths = np.diff(np.append(starts, total))
    values = np.fromiter((point.value for point in points), dtype=np.float64, count=total)

    means = np.add.reduceat(values, starts) / lengths
    middles = starts + lengths // 2

    return [
        SamplePoint(timestamp=points[int(middle)].timestamp, value=float(mean))
        for middle, mean in zip(middles, means)
    ]


def downsample(
    entries: Iterable[HistoryEntry], max_points: int = DEFAULT_MAX_POINTS
) -> List[SamplePoint]:
    """
    Reduce raw history to at most ``max_points`` samples.

    Sequences already within the limit come back as parsed, without
    aggregation. Longer ones are cut into consecutive buckets of
    ``ceil(n / max_points)`` readings (the last one may be shorter); each
    bucket becomes its mean value stamped with the timestamp of its element
    at ``len(bucket) // 2``.

    Raises:
        ValueError: If ``max_points`` is not positive.
    """
    if max_points <= 0:
        raise ValueError(f"max_points must be positive, got {max_points}")

    points = parse_entries(entries)
    if len(points) <= max_points:
        return points

    bucket_size = math.ceil(len(points) / max_points)
    return _average_buckets(points, bucket_size)
