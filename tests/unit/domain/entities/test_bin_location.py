from __future__ import annotations

import pytest

from wms_analytics.domain.entities.errors import InvalidBinLocationError
from wms_analytics.domain.entities.route import BinLocation


def test_parse_bin_location():
    location = BinLocation.parse("C-10-05")

    assert location.zone == "C"
    assert location.aisle == 10
    assert location.shelf == 5
    assert location.code == "C-10-05"
    assert location.zone_index == 2
    assert location.sort_key == (2, 10, 5)


def test_three_digit_aisles_are_accepted():
    assert BinLocation.parse("A-100-01").aisle == 100


@pytest.mark.parametrize(
    "code", ["", "a-01-01", "AA-01-01", "A-01-1", "A-1234-01", "A-01-01\n", "A_01_01"]
)
def test_malformed_codes_are_rejected(code):
    with pytest.raises(InvalidBinLocationError) as exc_info:
        BinLocation.parse(code)

    assert exc_info.value.codes == [code]
    assert "Invalid bin location" in exc_info.value.message
