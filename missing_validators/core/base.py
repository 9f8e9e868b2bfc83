"""
Base classes for all validators.

This module provides the foundation every validator builds on:
- ValidatorOptions: Typed, eagerly validated configuration
- EachValidator: Abstract base class checking one attribute at a time
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Type

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from missing_validators.core.exceptions import ConfigurationError
from missing_validators.core.messages import MessageResolver, get_message_catalog
from missing_validators.core.record import read_attribute
from missing_validators.utils.logger import setup_logger

logger = setup_logger(__name__)


class ValidatorOptions(BaseModel):
    """
    Options shared by every validator.

    Unknown keys are ignored. Subclasses add the keys their validator
    recognizes; absent optional keys mean no constraint.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    message: Optional[str] = None


class EachValidator(ABC):
    """
    Abstract base class for attribute validators.

    A validator is configured once and may be reused for any number of
    records. It keeps no per-record state: every failure goes straight to
    the record's error sink.

    Example:
        @register_validator("positive")
        class PositiveValidator(EachValidator):
            def validate_each(self, record, attribute, value):
                if not value > 0:
                    self.add_error(record, attribute, "positive")
    """

    OPTIONS_MODEL: Type[ValidatorOptions] = ValidatorOptions

    # Set by register_validator
    kind: Optional[str] = None

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        attributes: Sequence[str] = (),
        catalog: Optional[MessageResolver] = None,
        **kwargs: Any
    ):
        """
        Initialize validator with configuration.

        Args:
            options: Option mapping from Python or YAML. Keyword arguments
                     are merged on top.
            attributes: Attribute names checked by validate()
            catalog: Message resolver for default messages

        Raises:
            ConfigurationError: If the options are invalid
        """
        raw = dict(options or {})
        raw.update(kwargs)

        try:
            self.options = self.OPTIONS_MODEL.model_validate(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid options for {self.__class__.__name__}: {e}"
            ) from e

        if isinstance(attributes, str):
            attributes = [attributes]
        self.attributes = tuple(attributes)
        self.catalog = catalog or get_message_catalog()

    @abstractmethod
    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        """
        Check one attribute value.

        Args:
            record: Object being validated; must expose an ``errors`` sink
            attribute: Attribute name the value belongs to
            value: Current attribute value

        Failures are appended to ``record.errors``; nothing is raised for
        invalid values.
        """
        pass

    def validate(self, record: Any) -> None:
        """Run validate_each for every configured attribute."""
        for attribute in self.attributes:
            self.validate_each(record, attribute, read_attribute(record, attribute))

    def add_error(self, record: Any, attribute: str, key: str, **interpolations: Any) -> None:
        """
        Append a failure message for an attribute.

        Uses the ``message`` option when set, otherwise resolves
        ``errors.messages.<key>`` from the catalog.
        """
        message = self.options.message or self.catalog.resolve(
            f"errors.messages.{key}", interpolations
        )

        errors = record.errors
        if hasattr(errors, 'add'):
            errors.add(attribute, message)
        else:
            errors.setdefault(attribute, []).append(message)

        logger.debug(f"{self.__class__.__name__} rejected {attribute}: {message}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attributes={list(self.attributes)!r}, options={self.options!r})"
