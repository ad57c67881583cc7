from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict

import pytest

from wms_analytics.domain.entities.order import OrderFeatures
from wms_analytics.domain.services.demand_forecaster import DemandForecaster

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def sample_order_features() -> OrderFeatures:
    return OrderFeatures(
        item_count=10,
        hour_of_day=10,
        day_of_week=2,
        sku_count=5,
        zone_diversity=2,
        priority_level=3,
    )


@pytest.fixture()
def sample_order_payload() -> Dict[str, Any]:
    return {
        "order_item_count": 10,
        "hour_of_day": 10,
        "day_of_week": 2,
        "sku_count": 5,
        "zone_diversity": 2,
        "priority_level": 3,
    }


@pytest.fixture()
def deterministic_forecaster() -> DemandForecaster:
    return DemandForecaster(jitter_enabled=False)


@pytest.fixture()
def seeded_forecaster() -> DemandForecaster:
    return DemandForecaster(random_source=random.Random(42))


@pytest.fixture()
def fixed_today() -> date:
    # A Wednesday
    return date(2024, 1, 3)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()
