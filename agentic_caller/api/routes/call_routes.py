"""
API routes for call requests.
Handles the HTTP endpoint that turns a call description into a Twilio call.
"""

import json
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from agentic_caller.models.schemas import CallResponse, INVALID_PAYLOAD_MESSAGE
from agentic_caller.services.call_request_service import CallRequestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["calls"])


def get_call_request_service(request: Request) -> CallRequestService:
    """Return the orchestrator attached to the running application."""
    return request.app.state.call_request_service


@router.post('/call', response_model=CallResponse)
async def create_call(
    request: Request,
    service: CallRequestService = Depends(get_call_request_service),
):
    """
    Synthesize a script from the call description and ask Twilio to place the call.

    The body is read as raw JSON so that every validation failure is reported
    with the same {success, message} shape.

    Returns:
        JSONResponse: {success, message} with 200, 400 or 500
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Call request body is not valid JSON")
        body = CallResponse(success=False, message=INVALID_PAYLOAD_MESSAGE)
        return JSONResponse(status_code=400, content=body.model_dump())

    status_code, body = await service.handle(payload)
    return JSONResponse(status_code=status_code, content=body.model_dump())
