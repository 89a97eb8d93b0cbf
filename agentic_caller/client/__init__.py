"""
Client side of the call pipeline: form, activity log and HTTP transport.
"""

from agentic_caller.client.activity_log import ActivityLog, CallForm, CallLogEntry, CallStatus
from agentic_caller.client.console import CallConsole
from agentic_caller.client.transport import CallServiceClient
