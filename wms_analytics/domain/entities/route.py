"""Domain entities for warehouse bin locations and pick paths."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from wms_analytics.domain.entities.errors import InvalidBinLocationError
from wms_analytics.shared.consts import BIN_LOCATION_PATTERN

_BIN_LOCATION_RE = re.compile(BIN_LOCATION_PATTERN)


@dataclass(frozen=True, slots=True)
class BinLocation:
    """
    A physical storage slot addressed as ``<Zone>-<Aisle>-<Shelf>``.

    The zone is a single upper-case letter. For distance purposes zones are
    numbered by alphabet position, so ``A`` is 0, ``B`` is 1 and so on.
    """

    zone: str
    aisle: int
    shelf: int
    code: str

    @classmethod
    def parse(cls, code: str) -> "BinLocation":
        """Parse a location code such as ``A-01-01``.

        Raises:
            InvalidBinLocationError: If the code is not a valid location.
        """
        if not isinstance(code, str) or not _BIN_LOCATION_RE.fullmatch(code):
            raise InvalidBinLocationError([code])
        zone, aisle, shelf = code.split("-")
        return cls(zone=zone, aisle=int(aisle), shelf=int(shelf), code=code)

    @property
    def zone_index(self) -> int:
        return ord(self.zone) - ord("A")

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (self.zone_index, self.aisle, self.shelf)


@dataclass(slots=True)
class PickPath:
    """Ordered visit sequence for a closed pick tour."""

    total_distance: int
    estimated_time: int
    algorithm: str
    zones_optimized: int
    path: List[BinLocation] = field(default_factory=list)

    @property
    def codes(self) -> List[str]:
        return [location.code for location in self.path]
