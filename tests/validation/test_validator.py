import logging

import pytest

from fieldcheck.validation import EMAIL_RX, ValidationError, Validator, matches, unique


def test_new_validator_is_valid():
    v = Validator()
    assert v.valid()
    assert v.errors == {}


def test_add_error_marks_invalid():
    v = Validator()
    v.add_error("key", "message")
    assert not v.valid()
    assert v.errors == {"key": "message"}


def test_add_error_keeps_first_message():
    v = Validator()
    v.add_error("key", "first")
    v.add_error("key", "second")
    assert v.errors == {"key": "first"}


def test_check_records_only_failures():
    v = Validator()
    v.check(False, "key", "message")
    v.check(True, "key2", "message2")
    assert v.errors == {"key": "message"}


def test_check_passing_leaves_validator_untouched():
    v = Validator()
    v.check(True, "key", "message")
    assert v.valid()
    assert v.errors == {}


def test_errors_keep_insertion_order():
    v = Validator()
    v.add_error("zeta", "z")
    v.add_error("alpha", "a")
    v.add_error("zeta", "ignored")
    assert list(v.errors) == ["zeta", "alpha"]


def test_validators_do_not_share_errors():
    first = Validator()
    second = Validator()
    first.add_error("key", "message")
    assert second.valid()


def test_raise_if_invalid_is_noop_when_valid():
    Validator().raise_if_invalid()  # should not raise


def test_raise_if_invalid_carries_errors():
    v = Validator()
    v.add_error("email", "must be provided")
    v.add_error("name", "must be provided")
    with pytest.raises(ValidationError) as excinfo:
        v.raise_if_invalid()
    assert excinfo.value.errors == {"email": "must be provided", "name": "must be provided"}
    assert str(excinfo.value) == "email: must be provided; name: must be provided"


def test_validation_error_copies_mapping():
    errors = {"email": "must be provided"}
    exc = ValidationError(errors)
    errors["name"] = "late addition"
    assert exc.errors == {"email": "must be provided"}


def test_add_error_logs_recorded_and_ignored(caplog):
    caplog.set_level(logging.DEBUG, logger="fieldcheck.validation")
    v = Validator()
    v.add_error("email", "first")
    v.add_error("email", "second")
    messages = [record.getMessage() for record in caplog.records if record.name == "fieldcheck.validation"]
    assert any("Recorded validation error for email" in message for message in messages)
    assert any("Ignoring additional error for email" in message for message in messages)


def test_multiple_rules_then_late_error():
    v = Validator()
    v.check(matches("test@example.com", EMAIL_RX), "email", "Invalid email format")
    v.check(unique(["a", "b", "c"]), "unique", "Values must be unique")
    assert v.valid()

    v.add_error("email", "Email already exists")
    assert not v.valid()
    assert v.errors == {"email": "Email already exists"}


def test_late_error_does_not_replace_existing_email_error():
    v = Validator()
    v.check(matches("not-an-email", EMAIL_RX), "email", "Invalid email format")
    v.add_error("email", "Email already exists")
    assert v.errors == {"email": "Invalid email format"}
