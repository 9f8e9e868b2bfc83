"""
URL validator.

Structural check only: the URL is parsed, never fetched or resolved.
"""

import re
from typing import Any, List, Optional, Sequence, Union
from urllib.parse import SplitResult, urlsplit

from pydantic import field_validator

from missing_validators.core.base import EachValidator, ValidatorOptions
from missing_validators.core.registry import register_validator

HTTP_SCHEMES = ('http', 'https')

# Anything outside printable ASCII plus the characters RFC 3986 never allows.
_INVALID_URI_CHARS = re.compile(r'[^\x21-\x7e]|[<>"{}|\\^`]')

# "%" must start a two-digit hex escape.
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidURIError(ValueError):
    """Raised by parse_uri for strings that are not URIs."""
    pass


def parse_uri(value: Any) -> SplitResult:
    """
    Parse a URI string.

    Raises:
        InvalidURIError: If value is not a string or not a syntactically valid URI
    """
    if not isinstance(value, str):
        raise InvalidURIError(f"bad URI (is not a string?): {value!r}")
    if (
        not value
        or _INVALID_URI_CHARS.search(value)
        or _BAD_PERCENT_ESCAPE.search(value)
        or value.count("#") > 1
    ):
        raise InvalidURIError(f"bad URI: {value!r}")

    try:
        uri = urlsplit(value)
        # Port is parsed lazily; touch it so malformed ports surface here.
        uri.port
    except ValueError as e:
        raise InvalidURIError(f"bad URI: {value!r}: {e}") from e

    # Brackets only delimit an IPv6 host.
    if any(c in part for part in (uri.path, uri.query, uri.fragment) for c in "[]"):
        raise InvalidURIError(f"bad URI: {value!r}")

    return uri


def is_http(uri: SplitResult) -> bool:
    return uri.scheme.lower() in HTTP_SCHEMES and bool(uri.hostname)


def in_valid_top_level_domains(uri: SplitResult, tlds: Sequence[str]) -> bool:
    host = (uri.hostname or '').lower()
    return not tlds or any(host.endswith(f".{tld.lower()}") for tld in tlds)


def with_valid_scheme(uri: SplitResult, schemes: Sequence[str]) -> bool:
    scheme = uri.scheme.lower()
    return not schemes or any(scheme == str(allowed).lower() for allowed in schemes)


def is_root(uri: SplitResult) -> bool:
    return uri.path in ('', '/') and not uri.query and not uri.fragment


class UrlOptions(ValidatorOptions):
    domain: List[str] = []
    scheme: List[str] = []
    root: bool = False

    @field_validator('domain', 'scheme', mode='before')
    @classmethod
    def wrap_in_list(cls, value: Optional[Union[str, Sequence[str]]]):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)


@register_validator("url")
class UrlValidator(EachValidator):
    """
    Validate that a value is an http(s) URL matching the configured criteria.

    Configuration:
        domain: "com" or ["com", "org"]  # optional, accepted TLDs
        scheme: "https" or ["http", "https"]  # optional, accepted schemes
        root: true  # optional, path must be empty or "/" with no query/fragment
        message: "Custom message"  # optional

    Unparseable values and values that parse but miss a criterion get the
    same single ``url`` message.

    Example:
        - attribute: homepage
          validator: url
          options:
            scheme: https
            domain: [com, org]
    """

    OPTIONS_MODEL = UrlOptions

    def validate_each(self, record: Any, attribute: str, value: Any) -> None:
        try:
            uri = parse_uri(value)
        except InvalidURIError:
            self.add_error(record, attribute, 'url')
            return

        if not self.is_valid(uri):
            self.add_error(record, attribute, 'url')

    def is_valid(self, uri: SplitResult) -> bool:
        options = self.options
        return (
            is_http(uri)
            and in_valid_top_level_domains(uri, options.domain)
            and with_valid_scheme(uri, options.scheme)
            and (not options.root or is_root(uri))
        )
