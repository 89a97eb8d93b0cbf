"""
Call request orchestration.
Runs validation, script synthesis and dispatch for one incoming request and
maps each outcome to a single response.
"""

import enum
import logging
from typing import Any, Tuple

from agentic_caller.core.exceptions import CallRequestValidationError, ConfigurationError
from agentic_caller.models.outcomes import CallAccepted
from agentic_caller.models.schemas import CallResponse, validate_call_request
from agentic_caller.services.script_service import build_call_script
from agentic_caller.services.twilio_service import TwilioService

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected server error while attempting to trigger the call."


class RequestStage(enum.Enum):
    """Lifecycle stages of an incoming call request."""
    RECEIVED = "received"
    VALIDATED = "validated"
    DISPATCHED = "dispatched"
    RESPONDED = "responded"


class CallRequestService:
    """Turns a raw call request into exactly one response."""

    def __init__(self, dispatcher: TwilioService):
        self.dispatcher = dispatcher

    async def handle(self, payload: Any) -> Tuple[int, CallResponse]:
        """
        Process a raw request body.

        Args:
            payload: Decoded, untrusted request body

        Returns:
            Tuple of HTTP status code and response body
        """
        try:
            return await self._process(payload)
        except Exception:
            logger.exception("Failed to queue call")
            return self._respond(500, False, UNEXPECTED_ERROR_MESSAGE)

    async def _process(self, payload: Any) -> Tuple[int, CallResponse]:
        logger.debug(f"Call request {RequestStage.RECEIVED.value}")

        try:
            request = validate_call_request(payload)
        except CallRequestValidationError as e:
            logger.warning(f"Rejected call request: {e.field} - {e.message}")
            return self._respond(400, False, e.message)
        logger.info(f"Call request {RequestStage.VALIDATED.value} for {request.recipient_number}")

        script = build_call_script(request)

        try:
            outcome = await self.dispatcher.place_call(request.recipient_number, script)
        except ConfigurationError as e:
            logger.error(f"Cannot place call: {e}")
            return self._respond(500, False, str(e))
        logger.info(f"Call request {RequestStage.DISPATCHED.value} to {request.recipient_number}")

        if isinstance(outcome, CallAccepted):
            message = f"Call queued with SID {outcome.external_id}. Twilio will place the call shortly."
            return self._respond(200, True, message)
        return self._respond(500, False, outcome.reason)

    def _respond(self, status_code: int, success: bool, message: str) -> Tuple[int, CallResponse]:
        logger.info(f"Call request {RequestStage.RESPONDED.value} with status {status_code}")
        return status_code, CallResponse(success=success, message=message)
