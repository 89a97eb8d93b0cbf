"""
Exception types shared across the call-request pipeline.
"""


class AgenticCallerError(Exception):
    """Base class for all application errors."""


class CallRequestValidationError(AgenticCallerError):
    """A call request violated a validation rule."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ConfigurationError(AgenticCallerError):
    """Required provider configuration is missing."""


class CallTransportError(AgenticCallerError):
    """The call service could not be reached or returned an unreadable response."""
