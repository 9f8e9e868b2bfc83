"""
Validators module.

Contains all built-in validators organized by category:
- inequality_validators: Comparison against a constant or another attribute
- url_validators: URL structure with scheme/domain/root criteria
- format_validators: Email and MAC address patterns
- coordinate_validators: Latitude and longitude ranges

All validators are automatically registered via decorators.
"""

# Import all validators to trigger registration
from missing_validators.validators import inequality_validators
from missing_validators.validators import url_validators
from missing_validators.validators import format_validators
from missing_validators.validators import coordinate_validators

from missing_validators.validators.inequality_validators import (
    AttributeRef,
    Constant,
    InequalityOptions,
    InequalityValidator,
)
from missing_validators.validators.url_validators import UrlOptions, UrlValidator
from missing_validators.validators.format_validators import EmailValidator, MacAddressValidator
from missing_validators.validators.coordinate_validators import LatitudeValidator, LongitudeValidator

__all__ = [
    'inequality_validators',
    'url_validators',
    'format_validators',
    'coordinate_validators',
    'AttributeRef',
    'Constant',
    'InequalityOptions',
    'InequalityValidator',
    'UrlOptions',
    'UrlValidator',
    'EmailValidator',
    'MacAddressValidator',
    'LatitudeValidator',
    'LongitudeValidator',
]
