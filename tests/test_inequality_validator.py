"""
Tests for InequalityValidator.
"""

import operator
from datetime import date

import pytest

from missing_validators import AttributeRef, ConfigurationError, InequalityValidator, Record
from missing_validators.validators.inequality_validators import Constant, to_target


OPERATORS = [
    ("greater_than", operator.gt),
    ("greater_than_or_equal_to", operator.ge),
    ("equal_to", operator.eq),
    ("less_than", operator.lt),
    ("less_than_or_equal_to", operator.le),
    ("other_than", operator.ne),
]


@pytest.mark.parametrize("name,relation", OPERATORS)
@pytest.mark.parametrize("value,target", [(1, 2), (2, 2), (3, 2), (-1.5, -1.5), (0, -3)])
def test_reports_failure_iff_relation_is_false(catalog, name, relation, value, target):
    validator = InequalityValidator({name: target}, catalog=catalog)
    record = Record(amount=value)

    validator.validate_each(record, "amount", value)

    assert bool(record.errors["amount"]) == (not relation(value, target))


def test_age_at_least_18_passes(catalog):
    validator = InequalityValidator(greater_than_or_equal_to=18, catalog=catalog)
    person = Record(age=20)

    validator.validate_each(person, "age", person.age)

    assert person.errors["age"] == []


def test_less_than_message_references_target(catalog):
    validator = InequalityValidator(less_than=18, catalog=catalog)
    person = Record(age=20)

    validator.validate_each(person, "age", person.age)

    assert person.errors["age"] == ["must be less than 18"]


def test_compares_against_other_attribute(catalog):
    """startDate after endDate fails lessThan endDate."""
    validator = InequalityValidator(lessThan=AttributeRef("end_date"), catalog=catalog)
    trip = Record(start_date=date(2020, 1, 1), end_date=date(2019, 1, 1))

    validator.validate_each(trip, "start_date", trip.start_date)

    assert trip.errors["start_date"] == ["must be less than end_date"]


def test_attribute_reference_is_read_at_validation_time(catalog):
    validator = InequalityValidator(less_than=AttributeRef("end_date"), catalog=catalog)
    trip = Record(start_date=date(2020, 1, 1), end_date=date(2019, 1, 1))
    trip.end_date = date(2021, 1, 1)

    validator.validate_each(trip, "start_date", trip.start_date)

    assert trip.errors["start_date"] == []


def test_attribute_reference_from_mapping(catalog):
    validator = InequalityValidator({"greater_than": {"attribute": "minimum"}}, catalog=catalog)
    reading = Record(value=3, minimum=5)

    validator.validate_each(reading, "value", reading.value)

    assert reading.errors["value"] == ["must be greater than minimum"]


def test_requires_at_least_one_relation(catalog):
    with pytest.raises(ConfigurationError):
        InequalityValidator(catalog=catalog)

    with pytest.raises(ConfigurationError):
        InequalityValidator({"message": "nope", "unknown": 1}, catalog=catalog)


def test_stops_at_first_failing_relation_by_default(catalog):
    validator = InequalityValidator(greater_than=10, less_than=0, catalog=catalog)
    record = Record(amount=5)

    validator.validate_each(record, "amount", 5)

    assert record.errors["amount"] == ["must be greater than 10"]


def test_report_all_lists_every_failing_relation_in_order(catalog):
    validator = InequalityValidator(
        {"lessThan": 0, "greaterThan": 10, "otherThan": 5, "reportAll": True},
        catalog=catalog
    )
    record = Record(amount=5)

    validator.validate_each(record, "amount", 5)

    assert record.errors["amount"] == [
        "must be greater than 10",
        "must be less than 0",
        "must be other than 5",
    ]


def test_all_relations_must_hold(catalog):
    validator = InequalityValidator(greater_than=0, less_than=10, catalog=catalog)

    inside = Record(amount=5)
    validator.validate_each(inside, "amount", 5)
    assert inside.errors["amount"] == []

    outside = Record(amount=10)
    validator.validate_each(outside, "amount", 10)
    assert outside.errors["amount"] == ["must be less than 10"]


def test_incomparable_types_are_a_validation_failure(catalog):
    validator = InequalityValidator(greater_than=5, catalog=catalog)
    record = Record(amount="ten")

    validator.validate_each(record, "amount", "ten")

    assert record.errors["amount"] == ["cannot be compared with 5"]


def test_ordering_against_unset_attribute_is_not_comparable(catalog):
    validator = InequalityValidator(less_than=AttributeRef("ends_on"), catalog=catalog)
    event = Record(starts_on=date(2020, 1, 1))

    validator.validate_each(event, "starts_on", event.starts_on)

    assert event.errors["starts_on"] == ["cannot be compared with ends_on"]


def test_equal_to_unset_attribute_requires_value_to_be_unset(catalog):
    validator = InequalityValidator(equal_to=AttributeRef("confirmation"), catalog=catalog)

    matching = Record(password=None)
    validator.validate_each(matching, "password", None)
    assert matching.errors["password"] == []

    mismatched = Record(password="secret")
    validator.validate_each(mismatched, "password", "secret")
    assert mismatched.errors["password"] == ["must be equal to confirmation"]


def test_explicit_none_target_is_compared(catalog):
    validator = InequalityValidator(other_than=None, catalog=catalog)

    record = Record(token=None)
    validator.validate_each(record, "token", None)
    assert record.errors["token"] == ["must be other than None"]

    record = Record(token="abc")
    validator.validate_each(record, "token", "abc")
    assert record.errors["token"] == []


def test_custom_message_overrides_default(catalog):
    validator = InequalityValidator(less_than=18, message="is too old", catalog=catalog)
    person = Record(age=30)

    validator.validate_each(person, "age", 30)

    assert person.errors["age"] == ["is too old"]


def test_validator_is_stateless_across_calls(catalog):
    validator = InequalityValidator(less_than=18, catalog=catalog)
    person = Record(age=30)

    validator.validate_each(person, "age", 30)
    validator.validate_each(person, "age", 30)

    assert person.errors["age"] == ["must be less than 18", "must be less than 18"]


def test_validate_reads_configured_attributes(catalog):
    validator = InequalityValidator(
        greater_than=0, attributes=["width", "height"], catalog=catalog
    )
    box = Record(width=0, height=3)

    validator.validate(box)

    assert box.errors.to_dict() == {"width": ["must be greater than 0"]}


def test_to_target_wraps_values():
    assert to_target(5) == Constant(5)
    assert to_target({"attribute": "ends_on"}) == AttributeRef("ends_on")
    assert to_target({"attribute": "x", "other": 1}) == Constant({"attribute": "x", "other": 1})
    assert to_target(AttributeRef("a")) == AttributeRef("a")
