"""
Relational validators.

InequalityValidator compares an attribute against a constant or against
another attribute of the same record:

    InequalityValidator(greater_than_or_equal_to=18)
    InequalityValidator(less_than=AttributeRef("ends_on"))

From YAML, a reference is written as a mapping:

    options:
      less_than: {attribute: ends_on}
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from pydantic import Field, field_validator, model_validator

from missing_validators.core.base import EachValidator, ValidatorOptions
from missing_validators.core.record import read_attribute
from missing_validators.core.registry import register_validator


@dataclass(frozen=True)
class Constant:
    """Fixed comparison target."""
    value: Any


@dataclass(frozen=True)
class AttributeRef:
    """Comparison target read from another attribute at validation time."""
    name: str


Target = Union[Constant, AttributeRef]

# Evaluation order; also the order messages are reported in.
RELATIONS: Tuple[Tuple[str, Callable[[Any, Any], Any]], ...] = (
    ('greater_than', operator.gt),
    ('greater_than_or_equal_to', operator.ge),
    ('equal_to', operator.eq),
    ('less_than', operator.lt),
    ('less_than_or_equal_to', operator.le),
    ('other_than', operator.ne),
)


def to_target(raw: Any) -> Target:
    """
    Wrap a configured value as a comparison target.

    AttributeRef/Constant instances pass through, ``{"attribute": name}``
    becomes a reference and anything else is a constant.
    """
    if isinstance(raw, (Constant, AttributeRef)):
        return raw
    if isinstance(raw, dict) and set(raw) == {'attribute'}:
        name = raw['attribute']
        if not isinstance(name, str) or not name:
            raise ValueError(f"attribute reference must name an attribute, got {name!r}")
        return AttributeRef(name)
    return Constant(raw)


class InequalityOptions(ValidatorOptions):
    """Relations for InequalityValidator; at least one is required."""

    greater_than: Optional[Any] = Field(default=None, alias='greaterThan')
    greater_than_or_equal_to: Optional[Any] = Field(default=None, alias='greaterThanOrEqualTo')
    equal_to: Optional[Any] = Field(default=None, alias='equalTo')
    less_than: Optional[Any] = Field(default=None, alias='lessThan')
    less_than_or_equal_to: Optional[Any] = Field(default=None, alias='lessThanOrEqualTo')
    other_than: Optional[Any] = Field(default=None, alias='otherThan')

    # Keep checking after the first failing relation
    report_all: bool = Field(default=False, alias='reportAll')

    @field_validator(*[name for name, _ in RELATIONS], mode='before')
    @classmethod
    def wrap_target(cls, value):
        # Only runs for supplied keys, so an explicit None becomes Constant(None).
        return to_target(value)

    @model_validator(mode='after')
    def require_relation(self):
        if not self.relations():
            names = ", ".join(name for name, _ in RELATIONS)
            raise ValueError(f"at least one of {names} must be supplied")
        return self

    def relations(self) -> Tuple[Tuple[str, Callable[[Any, Any], Any], Target], ...]:
        """Configured (name, operator, target) triples in evaluation order."""
        return tuple(
            (name, compare, getattr(self, name))
            for name, compare in RELATIONS
            if getattr(self, name) is not None
        )


@register_validator("inequality")
class InequalityValidator(EachValidator):
    """
    Validate an attribute against one or more relations.

    Configuration:
        greater_than / greater_than_or_equal_to / equal_to /
        less_than / less_than_or_equal_to / other_than:
            constant, AttributeRef(name) or {attribute: name}
        report_all: false  # optional, report every failing relation
        message: "Custom message"  # optional

    By default only the first failing relation is reported. Incomparable
    operands (TypeError from the comparison) are reported with the
    ``not_comparable`` message for that relation.

    Example:
        - attribute: starts_on
          validator: inequality
          options:
            less_than: {attribute: ends_on}
    """

    OPTIONS_MODEL = InequalityOptions

    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        for name, compare, target in self.options.relations():
            expected, label = self._resolve(record, target)

            try:
                passed = bool(compare(value, expected))
            except TypeError:
                self.add_error(record, attribute, 'not_comparable', count=label)
                passed = False
            else:
                if not passed:
                    self.add_error(record, attribute, name, count=label)

            if not passed and not self.options.report_all:
                return

    def _resolve(self, record: Any, target: Target) -> Tuple[Any, Any]:
        """Return the comparison operand and the label used in messages."""
        if isinstance(target, AttributeRef):
            return read_attribute(record, target.name), target.name
        return target.value, target.value
