"""
Message catalog.

Default failure messages are looked up by dotted key
(``errors.messages.url``) under a locale root, then interpolated with
``str.format`` fields. Validators receive the catalog as a collaborator so
tests can inject a fixed set of messages.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import yaml

from missing_validators.utils.config import settings
from missing_validators.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_MESSAGES_PATH = Path(__file__).resolve().parent.parent / "locale" / "en.yaml"


@runtime_checkable
class MessageResolver(Protocol):
    """Anything that turns a catalog key into a message."""

    def resolve(self, key: str, interpolations: Optional[Mapping[str, Any]] = None) -> str:
        ...


class _KeepMissing(dict):
    """format_map helper that leaves unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class MessageCatalog:
    """
    YAML-backed message catalog.

    Usage:
        catalog = MessageCatalog()
        catalog.resolve("errors.messages.greater_than", {"count": 5})
        # -> "must be greater than 5"

        catalog = MessageCatalog(messages={"en": {"errors": {"messages": {"url": "bad url"}}}})
    """

    def __init__(
        self,
        messages: Optional[Dict[str, Any]] = None,
        locale: Optional[str] = None,
        path: Optional[str] = None
    ):
        """
        Initialize message catalog.

        Args:
            messages: Catalog tree keyed by locale. Takes precedence over path.
            locale: Locale root to read from (defaults to settings.LOCALE)
            path: YAML file to load (defaults to the packaged en.yaml)
        """
        self.locale = locale or settings.LOCALE

        if messages is not None:
            self._messages = messages
        else:
            self._messages = self._load(Path(path) if path else DEFAULT_MESSAGES_PATH)

    def _load(self, path: Path) -> Dict[str, Any]:
        """Load catalog tree from YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            logger.debug(f"Loaded message catalog from {path}")
            return data
        except FileNotFoundError:
            logger.error(f"Message catalog not found: {path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Error parsing message catalog {path}: {e}")
            raise

    def lookup(self, key: str) -> Optional[str]:
        """
        Get the raw template for a dotted key.

        Returns:
            Template string or None if not found
        """
        node: Any = self._messages.get(self.locale, {})
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def resolve(self, key: str, interpolations: Optional[Mapping[str, Any]] = None) -> str:
        template = self.lookup(key)

        if template is None:
            logger.warning(f"Missing message for key: {self.locale}.{key}")
            return f"translation missing: {self.locale}.{key}"

        if not interpolations:
            return template
        return template.format_map(_KeepMissing(interpolations))


@lru_cache(maxsize=1)
def get_message_catalog() -> MessageCatalog:
    """
    Get the shared default catalog.

    Returns:
        MessageCatalog built from settings
    """
    return MessageCatalog(path=settings.MESSAGES_PATH)
