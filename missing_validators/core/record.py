"""
Record and error sink used by validators.

Validators only need two things from a record: attribute values by name and
an ``errors`` sink keyed by attribute name. Any host object exposing those
works; ``Record`` is a minimal implementation.
"""

import threading
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List


class Errors:
    """
    Ordered error messages per attribute.

    Appends go through ``add`` under a lock, so validators running
    concurrently against one record keep a consistent list per attribute.
    Messages are never deduplicated.
    """

    def __init__(self):
        self._messages: Dict[str, List[str]] = {}
        self._lock = threading.Lock()

    def add(self, attribute: str, message: str) -> None:
        with self._lock:
            self._messages.setdefault(attribute, []).append(message)

    def __getitem__(self, attribute: str) -> List[str]:
        with self._lock:
            return list(self._messages.get(attribute, []))

    def __contains__(self, attribute: object) -> bool:
        with self._lock:
            return bool(self._messages.get(attribute))

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            names = [name for name, messages in self._messages.items() if messages]
        return iter(names)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(messages) for messages in self._messages.values())

    def __repr__(self) -> str:
        return f"Errors({self.to_dict()!r})"

    def is_empty(self) -> bool:
        return len(self) == 0

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to dictionary for JSON serialization"""
        with self._lock:
            return {
                name: list(messages)
                for name, messages in self._messages.items()
                if messages
            }

    def full_messages(self) -> List[str]:
        """Messages prefixed with a humanized attribute name."""
        return [
            f"{attribute.replace('_', ' ').capitalize()} {message}"
            for attribute, messages in self.to_dict().items()
            for message in messages
        ]


class Record:
    """
    Plain attribute bag with an error sink.

    Example:
        event = Record(starts_on=date(2020, 1, 1), ends_on=date(2019, 1, 1))
        validator.validate_each(event, "starts_on", event.starts_on)
        event.errors["starts_on"]
    """

    def __init__(self, **attributes: Any):
        for name, value in attributes.items():
            setattr(self, name, value)
        self.errors = Errors()

    def attributes(self) -> Dict[str, Any]:
        return {name: value for name, value in vars(self).items() if name != 'errors'}

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.attributes().items())
        return f"{self.__class__.__name__}({fields})"


def read_attribute(record: Any, name: str) -> Any:
    """
    Read an attribute value from a record.

    Mappings are read by key, anything else by attribute access.

    Returns:
        The value, or None when the attribute is unset
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)
