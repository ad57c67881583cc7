"""Port for the random source used to perturb forecasts."""

from __future__ import annotations

from typing import Protocol


class IRandomSource(Protocol):
    """Anything exposing ``random()`` in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float: ...
