"""
Domain service - pick route ordering.

Visits bins zone by zone, then aisle by aisle, then shelf by shelf, as a
closed tour from and back to a start point. This is a deterministic sort,
not a travelling-salesman search; it is O(n log n) in the number of bins.
"""

from typing import List, Sequence

from wms_analytics.domain.entities.errors import InvalidBinLocationError
from wms_analytics.domain.entities.route import BinLocation, PickPath
from wms_analytics.domain.services.numeric import round_half_up

ZONE_DISTANCE_METERS = 50
AISLE_DISTANCE_METERS = 10
SHELF_DISTANCE_METERS = 1
WALKING_SPEED_MPS = 1.4
PICK_DWELL_SECONDS = 30

ALGORITHM_TAG = "zone-clustering-nearest-neighbor"
NO_ALGORITHM_TAG = "none"


def leg_distance(origin: BinLocation, target: BinLocation) -> int:
    """Manhattan-style distance in meters between two bins."""
    return (
        abs(target.zone_index - origin.zone_index) * ZONE_DISTANCE_METERS
        + abs(target.aisle - origin.aisle) * AISLE_DISTANCE_METERS
        + abs(target.shelf - origin.shelf) * SHELF_DISTANCE_METERS
    )


def parse_locations(codes: Sequence[str]) -> List[BinLocation]:
    """Parse every code, reporting all invalid ones at once."""
    parsed: List[BinLocation] = []
    invalid: List[str] = []
    for code in codes:
        try:
            parsed.append(BinLocation.parse(code))
        except InvalidBinLocationError:
            invalid.append(code)
    if invalid:
        raise InvalidBinLocationError(invalid)
    return parsed


def optimize_pick_route(locations: Sequence[str], start_point: str) -> PickPath:
    """Order ``locations`` into a pick tour starting and ending at ``start_point``.

    Raises:
        InvalidBinLocationError: If a location or the start point is malformed.
    """
    if not locations:
        return PickPath(
            total_distance=0,
            estimated_time=0,
            algorithm=NO_ALGORITHM_TAG,
            zones_optimized=0,
        )

    start = BinLocation.parse(start_point)
    ordered = sorted(parse_locations(locations), key=lambda loc: loc.sort_key)

    distance = 0
    previous = start
    for location in ordered:
        distance += leg_distance(previous, location)
        previous = location
    distance += leg_distance(previous, start)

    estimated_time = distance / WALKING_SPEED_MPS + PICK_DWELL_SECONDS * len(ordered)

    return PickPath(
        total_distance=distance,
        estimated_time=round_half_up(estimated_time),
        algorithm=ALGORITHM_TAG,
        zones_optimized=len({location.zone for location in ordered}),
        path=ordered,
    )
