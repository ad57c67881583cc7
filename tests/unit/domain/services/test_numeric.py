from __future__ import annotations

import pytest

from wms_analytics.domain.services.numeric import (
    finite_or_none,
    mean,
    round_half_up,
    to_quantity,
)


@pytest.mark.parametrize(
    ("value", "expected"), [(0.5, 1), (1.49, 1), (2.5, 3), (-0.5, 0), (-1.5, -1)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(float("nan"), 0), (float("inf"), 0), (float("-inf"), 0), (-3.2, 0), (4.5, 5)],
)
def test_to_quantity_is_never_negative_or_undefined(value, expected):
    assert to_quantity(value) == expected


def test_finite_or_none():
    assert finite_or_none(1.5) == 1.5
    assert finite_or_none(float("inf")) is None
    assert finite_or_none(float("nan")) is None


def test_mean_handles_empty_and_overflowing_sums():
    assert mean([]) == 0.0
    assert mean([1, 2, 3, 4]) == 2.5
    assert mean([1e308, 1e308]) == pytest.approx(1e308)
