"""
Services package initialization.
Import and expose the call pipeline services.
"""

from agentic_caller.services.script_service import build_call_script
from agentic_caller.services.twilio_service import TwilioService
from agentic_caller.services.call_request_service import CallRequestService
