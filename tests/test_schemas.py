"""
Tests for call request validation.
"""

import pytest

from agentic_caller.core.exceptions import CallRequestValidationError
from agentic_caller.models.schemas import (
    CALLER_NAME_MESSAGE,
    INVALID_PAYLOAD_MESSAGE,
    OBJECTIVE_MESSAGE,
    RECIPIENT_NAME_MESSAGE,
    RECIPIENT_NUMBER_MESSAGE,
    CallRequest,
    collect_field_errors,
    validate_call_request,
)


def _payload(**overrides):
    payload = {
        "callerName": "Agentic Assistant",
        "recipientName": "Jamie Rivera",
        "recipientNumber": "+15559876543",
        "objective": "Confirm the meeting",
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize("number", ["+15551234567", "5551234", "+442071838750", "123456789012345"])
def test_accepts_e164_numbers(number):
    request = validate_call_request(_payload(recipientNumber=number))
    assert request.recipient_number == number


@pytest.mark.parametrize(
    "number",
    ["0123456789", "+1555", "abc", "", "+1 555 123 4567", "1234567890123456", "+15551234567x", "١٢٣٤٥٦٧"],
)
def test_rejects_malformed_numbers(number):
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(_payload(recipientNumber=number))
    assert exc_info.value.field == "recipientNumber"
    assert exc_info.value.message == RECIPIENT_NUMBER_MESSAGE


def test_number_is_trimmed_before_matching():
    request = validate_call_request(_payload(recipientNumber="  +15551234567\n"))
    assert request.recipient_number == "+15551234567"


@pytest.mark.parametrize("name", ["", "A", "  A  "])
def test_rejects_short_caller_name(name):
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(_payload(callerName=name))
    assert exc_info.value.field == "callerName"
    assert exc_info.value.message == CALLER_NAME_MESSAGE


def test_accepts_two_letter_names():
    request = validate_call_request(_payload(callerName="Al", recipientName=" Bo "))
    assert request.caller_name == "Al"
    assert request.recipient_name == "Bo"


def test_rejects_short_recipient_name():
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(_payload(recipientName="J"))
    assert exc_info.value.field == "recipientName"
    assert exc_info.value.message == RECIPIENT_NAME_MESSAGE


def test_objective_length_boundary():
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(_payload(objective="abcd"))
    assert exc_info.value.message == OBJECTIVE_MESSAGE

    assert validate_call_request(_payload(objective="abcde")).objective == "abcde"
    with pytest.raises(CallRequestValidationError):
        validate_call_request(_payload(objective="   abcd   "))


def test_first_failure_follows_field_order():
    payload = _payload(callerName="A", recipientName="B", recipientNumber="abc", objective="hi")
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(payload)
    assert exc_info.value.field == "callerName"

    payload["callerName"] = "Al"
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(payload)
    assert exc_info.value.field == "recipientName"


def test_missing_required_field_uses_field_message():
    payload = _payload()
    del payload["objective"]
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(payload)
    assert exc_info.value.field == "objective"
    assert exc_info.value.message == OBJECTIVE_MESSAGE


def test_optional_fields_never_fail_and_blank_becomes_none():
    request = validate_call_request(_payload(callerNumber="   ", notes=""))
    assert request.caller_number is None
    assert request.notes is None

    request = validate_call_request(_payload(callerNumber=" not a number ", notes="  Be warm  "))
    assert request.caller_number == "not a number"
    assert request.notes == "Be warm"


def test_non_text_values_are_rejected():
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(_payload(recipientNumber=15551234567))
    assert exc_info.value.field == "recipientNumber"
    assert exc_info.value.message == "recipientNumber must be text"


@pytest.mark.parametrize("payload", [None, "callerName=Al", ["Al"], 42])
def test_non_mapping_payload_is_invalid(payload):
    with pytest.raises(CallRequestValidationError) as exc_info:
        validate_call_request(payload)
    assert exc_info.value.message == INVALID_PAYLOAD_MESSAGE


def test_validation_is_pure():
    payload = _payload(recipientName="  Jamie  ", notes="  note ")
    snapshot = dict(payload)

    first = validate_call_request(payload)
    second = validate_call_request(payload)

    assert first == second
    assert payload == snapshot

    bad = _payload(recipientNumber="0123")
    messages = set()
    for _ in range(3):
        with pytest.raises(CallRequestValidationError) as exc_info:
            validate_call_request(bad)
        messages.add((exc_info.value.field, exc_info.value.message))
    assert messages == {("recipientNumber", RECIPIENT_NUMBER_MESSAGE)}


def test_collect_field_errors_reports_every_field():
    errors = collect_field_errors(
        {"callerName": "", "recipientName": "", "recipientNumber": "", "objective": ""}
    )
    assert errors == {
        "callerName": CALLER_NAME_MESSAGE,
        "recipientName": RECIPIENT_NAME_MESSAGE,
        "recipientNumber": RECIPIENT_NUMBER_MESSAGE,
        "objective": OBJECTIVE_MESSAGE,
    }
    assert collect_field_errors(_payload()) == {}


def test_call_request_is_immutable_and_serializes_camel_case():
    request = validate_call_request(_payload(notes="Bring slides"))
    with pytest.raises(Exception):
        request.objective = "changed"
    dumped = request.model_dump(by_alias=True, exclude_none=True)
    assert dumped["recipientNumber"] == "+15559876543"
    assert dumped["notes"] == "Bring slides"
    assert "callerNumber" not in dumped
    assert CallRequest.model_validate(dumped) == request
