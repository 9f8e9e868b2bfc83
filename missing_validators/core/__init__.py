"""
Validation core module.

Contains base classes, the record/error sink, the message catalog and the
validator registry.
"""

from missing_validators.core.base import EachValidator, ValidatorOptions
from missing_validators.core.exceptions import ConfigurationError, ValidatorException
from missing_validators.core.messages import MessageCatalog, MessageResolver, get_message_catalog
from missing_validators.core.record import Errors, Record, read_attribute
from missing_validators.core.registry import VALIDATOR_REGISTRY, register_validator, get_validator

__all__ = [
    'EachValidator',
    'ValidatorOptions',
    'ConfigurationError',
    'ValidatorException',
    'MessageCatalog',
    'MessageResolver',
    'get_message_catalog',
    'Errors',
    'Record',
    'read_attribute',
    'VALIDATOR_REGISTRY',
    'register_validator',
    'get_validator',
]
