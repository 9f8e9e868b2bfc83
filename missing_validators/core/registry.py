"""
Named validators.

Rules in YAML refer to validators by the name they registered under
(``validator: url``). Built-in validators register when
``missing_validators.validators`` is imported.
"""

from typing import Dict, Optional, Type

from missing_validators.core.base import EachValidator
from missing_validators.core.exceptions import ConfigurationError
from missing_validators.utils.logger import setup_logger

logger = setup_logger(__name__)

VALIDATOR_REGISTRY: Dict[str, Type[EachValidator]] = {}


def register_validator(name: str):
    """
    Class decorator making a validator available to rules as ``name``.

    The class is tagged with ``kind = name``. Registering a name twice
    replaces the earlier class and logs a warning.

    Usage:
        @register_validator("even")
        class EvenValidator(EachValidator):
            def validate_each(self, record, attribute, value):
                if value % 2:
                    self.add_error(record, attribute, "even")
    """
    if not name:
        raise ConfigurationError("Validator name must be a non-empty string")

    def decorator(cls: Type[EachValidator]):
        if not (isinstance(cls, type) and issubclass(cls, EachValidator)):
            raise ConfigurationError(f"{cls!r} is not an EachValidator subclass")

        previous = VALIDATOR_REGISTRY.get(name)
        if previous is not None and previous is not cls:
            logger.warning(f"Validator '{name}' replaced: {previous.__name__} -> {cls.__name__}")

        cls.kind = name
        VALIDATOR_REGISTRY[name] = cls
        return cls

    return decorator


def get_validator(name: str) -> Type[EachValidator]:
    """
    Validator class registered as ``name``.

    Raises:
        ConfigurationError: If nothing is registered under that name
    """
    try:
        return VALIDATOR_REGISTRY[name]
    except KeyError:
        raise ConfigurationError(
            f"Validator '{name}' not found in registry. "
            f"Available: {', '.join(sorted(VALIDATOR_REGISTRY))}"
        ) from None


def unregister_validator(name: str) -> Optional[Type[EachValidator]]:
    """Remove a validator from the registry, returning it if present."""
    return VALIDATOR_REGISTRY.pop(name, None)
