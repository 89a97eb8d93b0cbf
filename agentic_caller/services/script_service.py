"""
Script synthesis for outbound calls.
Renders a validated CallRequest into the text the agent speaks.
"""

from agentic_caller.models.schemas import CallRequest

DEFAULT_AGENT_NAME = "Agentic Assistant"
GENERIC_CALLBACK = "If you have any questions, please reach out to them at your convenience."
CLOSING = "Thank you and goodbye!"


def build_call_script(request: CallRequest) -> str:
    """
    Build the spoken script for a call.

    The result is plain text; escaping for TwiML happens when the call is placed.

    Args:
        request: A validated call request

    Returns:
        str: The script, segments joined by single spaces
    """
    caller = request.caller_name or DEFAULT_AGENT_NAME

    segments = [
        f"Hello {request.recipient_name}, this is an automated call for you.",
        f"{caller} asked me to share the following update.",
        request.objective,
    ]
    if request.notes:
        segments.append(f"Additional context from {caller}: {request.notes}")
    if request.caller_number:
        segments.append(f"If you have questions, please call back at {request.caller_number}.")
    else:
        segments.append(GENERIC_CALLBACK)
    segments.append(CLOSING)

    return " ".join(segments)
