"""
Tests for LatitudeValidator and LongitudeValidator.
"""

from decimal import Decimal

import pytest

from missing_validators import LatitudeValidator, LongitudeValidator, Record
from missing_validators.validators.coordinate_validators import to_coordinate


def check(validator_class, catalog, value):
    record = Record(position=value)
    validator_class(catalog=catalog).validate_each(record, "position", value)
    return record.errors["position"]


@pytest.mark.parametrize("value", [45.5, 0, -90, 90, "12.25", Decimal("-89.999")])
def test_valid_latitudes(catalog, value):
    assert check(LatitudeValidator, catalog, value) == []


@pytest.mark.parametrize("value", [91, -90.0001, "north", None, True, float("nan"), [1], 10**400])
def test_invalid_latitudes(catalog, value):
    assert check(LatitudeValidator, catalog, value) == ["is not a valid latitude"]


@pytest.mark.parametrize("value", [-180, 180, 0.5, "-122.4194"])
def test_valid_longitudes(catalog, value):
    assert check(LongitudeValidator, catalog, value) == []


@pytest.mark.parametrize("value", [180.01, -181, "", float("inf"), False, -10**400])
def test_invalid_longitudes(catalog, value):
    assert check(LongitudeValidator, catalog, value) == ["is not a valid longitude"]


def test_to_coordinate():
    assert to_coordinate(" 10.5 ") == 10.5
    assert to_coordinate(Decimal("1.25")) == 1.25
    assert to_coordinate("1e400") is None
    assert to_coordinate(object()) is None


def test_to_coordinate_never_raises_for_unconvertible_numbers():
    assert to_coordinate(10**400) is None
    assert to_coordinate(Decimal("sNaN")) is None
    assert to_coordinate(Decimal("NaN")) is None


def test_signaling_nan_is_reported_not_raised(catalog):
    assert check(LatitudeValidator, catalog, Decimal("sNaN")) == ["is not a valid latitude"]
    assert check(LongitudeValidator, catalog, Decimal("sNaN")) == ["is not a valid longitude"]
