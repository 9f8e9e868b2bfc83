"""
ValidationEngine - runs declared validation rules against records.

Rules are read from configuration, every validator is built up front (so a
bad rule fails when the engine is created, not when a record is checked),
and validators run in declaration order.
"""

from typing import Any, Dict, List, Optional, Tuple

from missing_validators.core.base import EachValidator
from missing_validators.core.config_loader import ValidationConfigLoader
from missing_validators.core.exceptions import ConfigurationError
from missing_validators.core.messages import MessageResolver
from missing_validators.core.registry import VALIDATOR_REGISTRY, get_validator
from missing_validators.utils.logger import setup_logger

# Import validators to trigger registration
from missing_validators import validators  # noqa: F401

logger = setup_logger(__name__)


class ModelValidator:
    """
    Validators for one model, in declaration order.

    Usage:
        event_validator = engine.for_model("event")
        if not event_validator.validate(event):
            print(event.errors.full_messages())
    """

    def __init__(self, model_name: str, validators: List[EachValidator], stop_on_first_error: bool = False):
        self.model_name = model_name
        self.validators = tuple(validators)
        self.stop_on_first_error = stop_on_first_error

    def validate(self, record: Any) -> bool:
        """
        Validate a record.

        Clears the record's errors, then runs every validator.

        Returns:
            True if no errors were added
        """
        record.errors.clear()

        for validator in self.validators:
            validator.validate(record)

            if self.stop_on_first_error and record.errors:
                logger.debug(f"Stopping {self.model_name} validation on first error")
                break

        return not record.errors

    def __repr__(self) -> str:
        return f"ModelValidator({self.model_name!r}, validators={len(self.validators)})"


class ValidationEngine:
    """
    Rule-driven validation engine.

    Orchestrates validation by:
    1. Loading rules from configuration
    2. Instantiating validators per model
    3. Executing them against records

    Usage:
        engine = ValidationEngine("rules.yaml")
        event = Record(starts_on=date(2020, 1, 1), ends_on=date(2019, 1, 1))

        if not engine.validate("event", event):
            print(event.errors.to_dict())
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        rules: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        catalog: Optional[MessageResolver] = None
    ):
        """
        Initialize validation engine.

        Args:
            config_path: Path to validation rules YAML file
            rules: Rules keyed by model name; used instead of the file when given
            catalog: Message resolver shared by all validators

        Raises:
            ConfigurationError: If any rule is invalid
        """
        self.config_loader = ValidationConfigLoader(config_path)
        self.catalog = catalog
        self._rules = rules
        self._models: Dict[str, ModelValidator] = {}
        self._build()

    def _build(self) -> None:
        if self._rules is not None:
            rules_by_model = self._rules
            global_settings: Dict[str, Any] = {}
        else:
            rules_by_model = {
                name: self.config_loader.get_model_rules(name)
                for name in self.config_loader.get_model_names()
            }
            global_settings = self.config_loader.get_global_settings()

        stop_on_error = bool(global_settings.get('stop_on_first_error', False))

        self._models = {
            model_name: ModelValidator(
                model_name,
                [self._build_validator(model_name, rule) for rule in rules or []],
                stop_on_first_error=stop_on_error
            )
            for model_name, rules in rules_by_model.items()
        }

        logger.info(
            f"ValidationEngine initialized with {len(self._models)} models "
            f"and {len(VALIDATOR_REGISTRY)} validators"
        )

    def _build_validator(self, model_name: str, rule: Dict[str, Any]) -> EachValidator:
        """
        Instantiate the validator for one rule.

        Raises:
            ConfigurationError: If the rule is incomplete or names an unknown validator
        """
        validator_name = rule.get('validator')
        if not validator_name:
            raise ConfigurationError(f"Rule for '{model_name}' missing 'validator' field: {rule}")

        validator_class = get_validator(validator_name)

        attributes = self._rule_attributes(rule)
        if not attributes:
            raise ConfigurationError(f"Rule for '{model_name}' has no 'attribute': {rule}")

        options = rule.get('options') or {}
        if not isinstance(options, dict):
            raise ConfigurationError(f"Rule options must be a mapping, got {type(options).__name__}")

        return validator_class(options, attributes=attributes, catalog=self.catalog)

    @staticmethod
    def _rule_attributes(rule: Dict[str, Any]) -> Tuple[str, ...]:
        attributes = rule.get('attributes') or rule.get('attribute') or ()
        if isinstance(attributes, str):
            attributes = [attributes]
        return tuple(attributes)

    def for_model(self, model_name: str) -> ModelValidator:
        """
        Get the validators declared for a model.

        Raises:
            ConfigurationError: If no rules are declared for the model
        """
        try:
            return self._models[model_name]
        except KeyError:
            raise ConfigurationError(f"No validation rules declared for model '{model_name}'") from None

    def validate(self, model_name: str, record: Any) -> bool:
        """
        Validate a record against a model's rules.

        Args:
            model_name: Model identifier from configuration
            record: Object with attributes and an ``errors`` sink

        Returns:
            True if the record is valid
        """
        logger.debug(f"Validating {model_name}")
        return self.for_model(model_name).validate(record)

    def reload_config(self) -> None:
        """Reload rules from file and rebuild validators"""
        logger.info("Reloading validation configuration")
        self.config_loader.reload()
        self._build()

    def get_available_validators(self) -> List[str]:
        """
        Get list of all registered validators.

        Returns:
            List of validator names
        """
        return list(VALIDATOR_REGISTRY.keys())

    def get_model_names(self) -> List[str]:
        return list(self._models.keys())

    def get_model_rules(self, model_name: str) -> List[Dict[str, Any]]:
        """
        Get declared rules for a model.

        Args:
            model_name: Model identifier

        Returns:
            List of rule configurations
        """
        if self._rules is not None:
            return list(self._rules.get(model_name) or [])
        return self.config_loader.get_model_rules(model_name)
