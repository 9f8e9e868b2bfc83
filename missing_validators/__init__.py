"""
missing_validators - attribute validators for record-like objects.

Main components:
- InequalityValidator: compare against a constant or another attribute
- UrlValidator: http(s) URLs with scheme/domain/root criteria
- EmailValidator, MacAddressValidator: format checks
- LatitudeValidator, LongitudeValidator: coordinate ranges
- ValidationEngine: run rules declared in YAML

Usage:
    from missing_validators import InequalityValidator, AttributeRef, Record

    event = Record(starts_on=date(2020, 1, 1), ends_on=date(2019, 1, 1))
    InequalityValidator(less_than=AttributeRef("ends_on")).validate_each(
        event, "starts_on", event.starts_on
    )
    event.errors["starts_on"]  # ["must be less than ends_on"]
"""

from missing_validators.core import (
    ConfigurationError,
    EachValidator,
    Errors,
    MessageCatalog,
    Record,
    ValidatorOptions,
    register_validator,
)
from missing_validators.validators import (
    AttributeRef,
    Constant,
    EmailValidator,
    InequalityValidator,
    LatitudeValidator,
    LongitudeValidator,
    MacAddressValidator,
    UrlValidator,
)
from missing_validators.engine import ModelValidator, ValidationEngine

__version__ = "1.0.0"

__all__ = [
    'ConfigurationError',
    'EachValidator',
    'Errors',
    'MessageCatalog',
    'Record',
    'ValidatorOptions',
    'register_validator',
    'AttributeRef',
    'Constant',
    'EmailValidator',
    'InequalityValidator',
    'LatitudeValidator',
    'LongitudeValidator',
    'MacAddressValidator',
    'UrlValidator',
    'ModelValidator',
    'ValidationEngine',
]
