"""
Shared fixtures for validator tests.
"""

import pytest

from missing_validators import MessageCatalog, Record

TEST_MESSAGES = {
    "en": {
        "errors": {
            "messages": {
                "url": "is not a valid URL",
                "email": "is not a valid email address",
                "mac_address": "is not a valid MAC address",
                "latitude": "is not a valid latitude",
                "longitude": "is not a valid longitude",
                "greater_than": "must be greater than {count}",
                "greater_than_or_equal_to": "must be greater than or equal to {count}",
                "equal_to": "must be equal to {count}",
                "less_than": "must be less than {count}",
                "less_than_or_equal_to": "must be less than or equal to {count}",
                "other_than": "must be other than {count}",
                "not_comparable": "cannot be compared with {count}",
            }
        }
    }
}


@pytest.fixture
def catalog():
    return MessageCatalog(messages=TEST_MESSAGES, locale="en")


@pytest.fixture
def record():
    return Record()
