"""
Data models and schemas.
Defines Pydantic models for call request validation and API responses.
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from agentic_caller.core.exceptions import CallRequestValidationError

E164_PATTERN = re.compile(r"\+?[1-9]\d{6,14}", re.ASCII)

CALLER_NAME_MESSAGE = "Caller name is required"
RECIPIENT_NAME_MESSAGE = "Recipient name is required"
RECIPIENT_NUMBER_MESSAGE = "Enter an E.164 phone number, e.g. +15551234567"
OBJECTIVE_MESSAGE = "Please describe what the agent should say"
INVALID_PAYLOAD_MESSAGE = "Invalid payload"

_REQUIRED_FIELDS = ("caller_name", "recipient_name", "recipient_number", "objective")


class CallRequest(BaseModel):
    """
    A normalized, validated request to place a call.

    Wire keys are camelCase (callerName, recipientNumber, ...). Every text
    field is trimmed; blank optional fields become None.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=True,
    )

    caller_name: str = Field("", description="Who the agent is calling on behalf of")
    caller_number: Optional[str] = Field(None, description="Callback number read out in the script")
    recipient_name: str = Field("", description="Name of the person being called")
    recipient_number: str = Field("", description="Number to call in E.164 format (e.g., +15551234567)")
    objective: str = Field("", description="What the agent should say")
    notes: Optional[str] = Field(None, description="Additional context for the recipient")

    @field_validator("*", mode="before")
    @classmethod
    def require_text(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return "" if info.field_name in _REQUIRED_FIELDS else None
        if not isinstance(v, str):
            raise PydanticCustomError(
                "text_type",
                "{field} must be text",
                {"field": to_camel(info.field_name)},
            )
        return v

    @field_validator("caller_name")
    @classmethod
    def check_caller_name(cls, v: str) -> str:
        if len(v) < 2:
            raise PydanticCustomError("caller_name", CALLER_NAME_MESSAGE)
        return v

    @field_validator("recipient_name")
    @classmethod
    def check_recipient_name(cls, v: str) -> str:
        if len(v) < 2:
            raise PydanticCustomError("recipient_name", RECIPIENT_NAME_MESSAGE)
        return v

    @field_validator("recipient_number")
    @classmethod
    def check_recipient_number(cls, v: str) -> str:
        if not E164_PATTERN.fullmatch(v):
            raise PydanticCustomError("recipient_number", RECIPIENT_NUMBER_MESSAGE)
        return v

    @field_validator("objective")
    @classmethod
    def check_objective(cls, v: str) -> str:
        if len(v) < 5:
            raise PydanticCustomError("objective", OBJECTIVE_MESSAGE)
        return v

    @field_validator("caller_number", "notes")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class CallResponse(BaseModel):
    """Response model for the call endpoint."""

    success: bool = Field(
        ...,
        description="Whether the call was handed to the provider"
    )
    message: str = Field(
        ...,
        description="A human-readable message describing the result"
    )


def _wire_name(loc) -> str:
    """Map an error location to the camelCase field name clients send."""
    if not loc:
        return "payload"
    name = str(loc[0])
    field = CallRequest.model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


def _validation_errors(payload: Any):
    if not isinstance(payload, Mapping):
        return None, [("payload", INVALID_PAYLOAD_MESSAGE)]
    try:
        return CallRequest.model_validate(dict(payload)), []
    except ValidationError as exc:
        return None, [(_wire_name(error["loc"]), error["msg"]) for error in exc.errors()]


def validate_call_request(payload: Any) -> CallRequest:
    """
    Validate an untrusted payload into a CallRequest.

    Args:
        payload: Decoded request body (expected to be a mapping of text fields)

    Returns:
        CallRequest: The trimmed, normalized request

    Raises:
        CallRequestValidationError: For the first violated field, in field order
    """
    request, errors = _validation_errors(payload)
    if errors:
        field, message = errors[0]
        raise CallRequestValidationError(field, message)
    return request


def collect_field_errors(payload: Any) -> Dict[str, str]:
    """Return the first error message for every failing field, keyed by wire name."""
    _, errors = _validation_errors(payload)
    field_errors: Dict[str, str] = {}
    for field, message in errors:
        field_errors.setdefault(field, message)
    return field_errors
