"""
Assertion helpers for test suites.

Each matcher runs a model's declared validations with known good and bad
values and reports whether the attribute is validated as expected:

    event_validator = engine.for_model("event")
    matcher = ensure_inequality_of("starts_on").to("ends_on")
    assert matcher.matches(event_validator, event), matcher.failure_message

Checks run against a copy of the record; the record passed in is left as is.
Records may be attribute objects or mappings.
"""

import copy
from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, Tuple

from missing_validators.core.record import Errors, read_attribute


class Validates(Protocol):
    def validate(self, record: Any) -> bool:
        ...


class MappingCandidate(dict):
    """Copy of a mapping record with its own error sink."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.errors = Errors()


class ValidationMatcher:
    """
    Base matcher: ``INVALID`` values must add an error on the attribute and
    ``VALID`` values must not.
    """

    EXPECTATION = "be validated"
    INVALID: Tuple[Any, ...] = ()
    VALID: Tuple[Any, ...] = ()

    def __init__(self, attribute: str):
        self.attribute = attribute
        self.failure_message: Optional[str] = None

    def matches(self, subject: Validates, record: Any) -> bool:
        self.failure_message = None

        for value, should_fail in self.cases(record):
            messages = self._errors_for(subject, record, {self.attribute: value})
            if bool(messages) != should_fail:
                expectation = "reject" if should_fail else "accept"
                self.failure_message = (
                    f"Expected {self.attribute} to {self.expectation()}: "
                    f"should {expectation} {value!r}, got errors {messages!r}"
                )
                return False

        return True

    def expectation(self) -> str:
        return self.EXPECTATION

    def cases(self, record: Any) -> List[Tuple[Any, bool]]:
        """(value, should_fail) pairs to try, in order."""
        return [(value, True) for value in self.INVALID] + [(value, False) for value in self.VALID]

    def _errors_for(self, subject: Validates, record: Any, changes: dict) -> List[str]:
        if isinstance(record, Mapping):
            candidate = MappingCandidate(record)
            candidate.update(changes)
        else:
            candidate = copy.copy(record)
            for name, value in changes.items():
                setattr(candidate, name, value)
            candidate.errors = Errors()

        subject.validate(candidate)
        return candidate.errors[self.attribute]

    @property
    def description(self) -> str:
        return f"ensure {self.attribute} to {self.expectation()}"


class EnsureValidUrlFormatOf(ValidationMatcher):
    EXPECTATION = "be a valid URL"
    INVALID = ("invalid url",)


class EnsureValidEmailFormatOf(ValidationMatcher):
    EXPECTATION = "be a valid email address"
    INVALID = ("invalid@email",)
    VALID = ("valid@email.com",)


class EnsureValidMacAddressFormatOf(ValidationMatcher):
    EXPECTATION = "be a valid MAC address"
    INVALID = ("invalid mac address",)
    VALID = ("08:00:2b:01:02:03",)


class EnsureInequalityOf(ValidationMatcher):
    """
    Check that ``attribute`` must not exceed ``other``.

    Uses the record's current values: the larger one is assigned to
    ``attribute`` and the smaller to ``other``, which must be rejected.
    """

    def __init__(self, attribute: str):
        super().__init__(attribute)
        self.other: Optional[str] = None

    def to(self, other: str) -> "EnsureInequalityOf":
        self.other = other
        return self

    def expectation(self) -> str:
        return f"be less than or equal to {self.other}"

    def matches(self, subject: Validates, record: Any) -> bool:
        if self.other is None:
            raise ValueError("ensure_inequality_of requires .to(<other attribute>)")

        self.failure_message = None
        low, high = sorted(
            [read_attribute(record, self.attribute), read_attribute(record, self.other)]
        )
        if low == high:
            raise ValueError(
                f"{self.attribute} and {self.other} must hold different values to check inequality"
            )

        messages = self._errors_for(subject, record, {self.attribute: high, self.other: low})
        if not messages:
            self.failure_message = (
                f"Expected {self.attribute} to {self.expectation()}: "
                f"{self.attribute}={high!r} with {self.other}={low!r} was accepted"
            )
            return False
        return True


def ensure_valid_url_format_of(attribute: str) -> EnsureValidUrlFormatOf:
    return EnsureValidUrlFormatOf(attribute)


def ensure_valid_email_format_of(attribute: str) -> EnsureValidEmailFormatOf:
    return EnsureValidEmailFormatOf(attribute)


def ensure_valid_mac_address_format_of(attribute: str) -> EnsureValidMacAddressFormatOf:
    return EnsureValidMacAddressFormatOf(attribute)


def ensure_inequality_of(attribute: str) -> EnsureInequalityOf:
    return EnsureInequalityOf(attribute)
