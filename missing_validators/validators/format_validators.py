"""
Pattern validators.

Contains validators that match a string against a fixed pattern:
- EmailValidator: local-part@domain.tld
- MacAddressValidator: six hex pairs separated by ':' or '-'
"""

import re
from typing import Any, Pattern

from missing_validators.core.base import EachValidator
from missing_validators.core.registry import register_validator


class PatternValidator(EachValidator):
    """
    Base for validators that require a full regex match.

    Subclasses set PATTERN and MESSAGE_KEY. Non-string values fail.
    """

    PATTERN: Pattern[str]
    MESSAGE_KEY: str

    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        if not isinstance(value, str) or not self.PATTERN.fullmatch(value):
            self.add_error(record, attribute, self.MESSAGE_KEY)


@register_validator("email")
class EmailValidator(PatternValidator):
    """
    Validate email address format.

    Configuration:
        message: "Custom message"  # optional

    Example:
        - attribute: contact
          validator: email
    """

    PATTERN = re.compile(
        r"[^@\s]+@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,}",
        re.IGNORECASE
    )
    MESSAGE_KEY = "email"


@register_validator("mac_address")
class MacAddressValidator(PatternValidator):
    """
    Validate MAC address format, e.g. 08:00:2b:01:02:03 or 08-00-2B-01-02-03.

    The separator must be the same throughout.
    """

    PATTERN = re.compile(r"[0-9a-f]{2}([:-])(?:[0-9a-f]{2}\1){4}[0-9a-f]{2}", re.IGNORECASE)
    MESSAGE_KEY = "mac_address"
