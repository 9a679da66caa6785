from __future__ import annotations

from datetime import timedelta

import pytest

from power_terminal.domain.services.downsampler import (
    DEFAULT_MAX_POINTS,
    downsample,
    parse_entries,
    parse_state_value,
)


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        ("1250.5", 1250.5),
        (" -300 ", -300.0),
        ("0", 0.0),
        ("unavailable", None),
        ("unknown", None),
        ("Unavailable", None),
        ("", None),
        ("on", None),
        ("12abc", None),
        ("nan", None),
        ("inf", None),
        (None, None),
    ],
)
def test_parse_state_value(state, expected) -> None:
    assert parse_state_value(state) == expected


def test_parse_entries_drops_unreadable_states(make_entries) -> None:
    entries = make_entries(["100", "unavailable", "abc", "200", ""])

    points = parse_entries(entries)

    assert [point.value for point in points] == [100.0, 200.0]
    assert points[0].timestamp == entries[0].last_changed
    assert points[1].timestamp == entries[3].last_changed


def test_short_sequence_is_returned_unchanged(make_entries) -> None:
    entries = make_entries(["10", "unknown", "30"])

    points = downsample(entries, max_points=5)

    assert [(p.timestamp, p.value) for p in points] == [
        (entries[0].last_changed, 10.0),
        (entries[2].last_changed, 30.0),
    ]


def test_output_never_exceeds_limit(make_entries) -> None:
    for total in (1, 287, 288, 289, 575, 577, 1000, 1441):
        entries = make_entries([str(index) for index in range(total)])
        assert len(downsample(entries, DEFAULT_MAX_POINTS)) <= DEFAULT_MAX_POINTS


def test_constant_series_keeps_its_value(make_entries) -> None:
    entries = make_entries(["750"] * 20)

    points = downsample(entries, max_points=10)

    assert len(points) == 10
    assert all(point.value == 750.0 for point in points)


def test_six_hundred_readings_reduce_to_two_hundred(make_entries) -> None:
    entries = make_entries(["500"] * 600)

    points = downsample(entries, max_points=288)

    assert len(points) == 200
    assert all(point.value == 500.0 for point in points)


def test_bucket_mean_and_representative_timestamp(make_entries) -> None:
    entries = make_entries(["100", "200", "600", "0", "10", "20", "30"])

    points = downsample(entries, max_points=3)

    # ceil(7 / 3) = 3 readings per bucket, the last bucket holds one.
    assert [point.value for point in points] == [300.0, 10.0, 30.0]
    assert points[0].timestamp == entries[1].last_changed
    assert points[1].timestamp == entries[4].last_changed
    assert points[2].timestamp == entries[6].last_changed


def test_unreadable_states_are_dropped_before_bucketing(make_entries) -> None:
    entries = make_entries(["100", "unavailable", "300", "unknown", "500", "700"])

    points = downsample(entries, max_points=2)

    assert [point.value for point in points] == [200.0, 600.0]


def test_output_is_time_ordered(make_entries) -> None:
    entries = make_entries(
        [str(index % 17) for index in range(1000)], step=timedelta(seconds=30)
    )

    points = downsample(entries, max_points=288)

    timestamps = [point.timestamp for point in points]
    assert timestamps == sorted(timestamps)


def test_empty_history_yields_empty_series() -> None:
    assert downsample([], max_points=288) == []


@pytest.mark.parametrize("max_points", [0, -1])
def test_non_positive_limit_is_rejected(make_entries, max_points) -> None:
    with pytest.raises(ValueError):
        downsample(make_entries(["1"]), max_points=max_points)
