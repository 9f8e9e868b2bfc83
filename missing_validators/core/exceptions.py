"""
Custom exceptions for the validators package.

Invalid attribute values are never raised; they are reported as messages on
the record's error sink. Exceptions here signal programming errors.
"""


class ValidatorException(Exception):
    """Base exception for the validators package."""
    pass


class ConfigurationError(ValidatorException, ValueError):
    """Exception raised when a validator or rule is configured incorrectly."""
    pass
