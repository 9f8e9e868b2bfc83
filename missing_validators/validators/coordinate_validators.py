"""
Coordinate validators.

- LatitudeValidator: value in [-90, 90]
- LongitudeValidator: value in [-180, 180]
"""

import math
from decimal import Decimal
from typing import Any, Optional

from missing_validators.core.base import EachValidator
from missing_validators.core.registry import register_validator


def to_coordinate(value: Any) -> Optional[float]:
    """
    Coerce a value to a finite float.

    Returns:
        The float, or None for booleans, non-numeric values and NaN/infinity
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        return None

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        # Huge ints overflow; signaling NaN refuses conversion.
        return None

    return number if math.isfinite(number) else None


class RangeValidator(EachValidator):
    """Base for inclusive numeric range checks."""

    MINIMUM: float
    MAXIMUM: float
    MESSAGE_KEY: str

    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        number = to_coordinate(value)
        if number is None or not self.MINIMUM <= number <= self.MAXIMUM:
            self.add_error(record, attribute, self.MESSAGE_KEY)


@register_validator("latitude")
class LatitudeValidator(RangeValidator):
    """Validate latitude in degrees, -90 to 90 inclusive."""

    MINIMUM = -90.0
    MAXIMUM = 90.0
    MESSAGE_KEY = "latitude"


@register_validator("longitude")
class LongitudeValidator(RangeValidator):
    """Validate longitude in degrees, -180 to 180 inclusive."""

    MINIMUM = -180.0
    MAXIMUM = 180.0
    MESSAGE_KEY = "longitude"
