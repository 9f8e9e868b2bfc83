"""
Tests for EmailValidator and MacAddressValidator.
"""

import pytest

from missing_validators import EmailValidator, MacAddressValidator, Record


def check(validator_class, catalog, value, **options):
    record = Record(field=value)
    validator_class(options, catalog=catalog).validate_each(record, "field", value)
    return record.errors["field"]


@pytest.mark.parametrize("value", [
    "user@example.com",
    "first.last+tag@sub.example.co.uk",
    "USER@EXAMPLE.ORG",
    "o'brien@example-mail.io",
])
def test_valid_emails(catalog, value):
    assert check(EmailValidator, catalog, value) == []


@pytest.mark.parametrize("value", [
    "user@@bad",
    "invalid@email",
    "no-at-sign.example.com",
    "user@.com",
    "user@example.c",
    "user name@example.com",
    "user@example.com ",
    "",
    None,
    123,
])
def test_invalid_emails(catalog, value):
    assert check(EmailValidator, catalog, value) == ["is not a valid email address"]


def test_email_custom_message(catalog):
    assert check(EmailValidator, catalog, "bad", message="wrong") == ["wrong"]


@pytest.mark.parametrize("value", [
    "aa:bb:cc:dd:ee:ff",
    "08-00-2B-01-02-03",
    "08:00:2b:01:02:03",
])
def test_valid_mac_addresses(catalog, value):
    assert check(MacAddressValidator, catalog, value) == []


@pytest.mark.parametrize("value", [
    "aabbccddeeff",
    "aa:bb:cc:dd:ee",
    "aa:bb:cc:dd:ee:ff:00",
    "aa:bb-cc:dd:ee:ff",
    "gg:bb:cc:dd:ee:ff",
    "0800.2b01.0203",
    "invalid mac address",
    None,
])
def test_invalid_mac_addresses(catalog, value):
    assert check(MacAddressValidator, catalog, value) == ["is not a valid MAC address"]
