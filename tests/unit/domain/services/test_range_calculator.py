from __future__ import annotations

import pytest

from power_terminal.domain.entities.time_series import ValueRange
from power_terminal.domain.services.range_calculator import (
    DEFAULT_RANGE,
    calculate_range,
    nice_step,
    round_away_from_zero,
)


def test_empty_pool_uses_default_range() -> None:
    assert calculate_range([]) == DEFAULT_RANGE
    assert calculate_range([(), (), (), ()]) == ValueRange(min=0.0, max=1000.0)


def test_signed_pool_rounds_outwards(make_points) -> None:
    result = calculate_range([make_points([1800]), make_points([-300])])

    assert result == ValueRange(min=-500.0, max=2000.0)


def test_small_positive_values_keep_minimum_top(make_points) -> None:
    result = calculate_range([make_points([120, 340, 80])])

    assert result == ValueRange(min=0.0, max=1000.0)


def test_larger_magnitudes_use_coarser_steps(make_points) -> None:
    assert calculate_range([make_points([4200, -800])]) == ValueRange(
        min=-1000.0, max=5000.0
    )
    assert calculate_range([make_points([7300])]) == ValueRange(min=0.0, max=8000.0)


def test_only_negative_values_still_include_zero(make_points) -> None:
    result = calculate_range([make_points([-1500, -2600])])

    assert result == ValueRange(min=-3000.0, max=1000.0)


@pytest.mark.parametrize(
    "values",
    [[0], [1], [999], [1000], [1001], [-1], [2500, -4999], [12345, -6789]],
)
def test_range_invariants(make_points, values) -> None:
    result = calculate_range([make_points(values)])

    assert result.min <= 0 <= result.max
    assert result.max >= 1000
    assert result.min <= min(values)
    assert result.max >= max(values)


@pytest.mark.parametrize(
    ("magnitude", "step"),
    [(0, 500), (2000, 500), (2001, 1000), (5000, 1000), (5001, 2000)],
)
def test_nice_step(magnitude, step) -> None:
    assert nice_step(magnitude) == step


def test_round_away_from_zero() -> None:
    assert round_away_from_zero(1800) == 2000
    assert round_away_from_zero(-300) == -500
    assert round_away_from_zero(2000) == 2000
    assert round_away_from_zero(5200) == 6000
