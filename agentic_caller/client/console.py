"""
Call console.
Submits the form, records an optimistic queued entry and reconciles it with
the server's answer when the round trip completes.
"""

import asyncio
import logging
from typing import Dict, Optional

from agentic_caller.client.activity_log import ActivityLog, CallForm, CallLogEntry, CallStatus
from agentic_caller.client.transport import CallServiceClient
from agentic_caller.core.exceptions import CallTransportError
from agentic_caller.models.schemas import CallRequest, collect_field_errors, validate_call_request

logger = logging.getLogger(__name__)

CONNECTIVITY_ERROR_MESSAGE = "Unexpected error communicating with the call service. Check server logs."


class CallConsole:
    """Form, activity log and in-flight requests of one client session."""

    def __init__(
        self,
        transport: CallServiceClient,
        form: Optional[CallForm] = None,
        log: Optional[ActivityLog] = None,
    ):
        self.transport = transport
        self.form = form or CallForm()
        self.log = log or ActivityLog()
        self.pending: Dict[str, asyncio.Task] = {}

    @property
    def is_submitting(self) -> bool:
        return bool(self.pending)

    def submit(self) -> Optional["asyncio.Task[Optional[CallLogEntry]]"]:
        """
        Submit the current form.

        Must be called from a running event loop. Invalid input sets the form
        errors and returns None without creating an entry. Otherwise a queued
        entry is added immediately and the round trip runs as a task.

        Returns:
            The task resolving to the updated entry, or None if the form is invalid
        """
        errors = collect_field_errors(self.form.values)
        if errors:
            self.form.errors = errors
            return None

        request = validate_call_request(self.form.values)
        entry = CallLogEntry.queued(request)
        self.log.add(entry)
        logger.info(f"Queued call request {entry.id} to {entry.recipient_number}")

        task = asyncio.get_running_loop().create_task(self._send(entry.id, request))
        self.pending[entry.id] = task
        return task

    async def _send(self, entry_id: str, request: CallRequest) -> Optional[CallLogEntry]:
        payload = request.model_dump(by_alias=True, exclude_none=True)
        try:
            response = await self.transport.submit(payload)
        except CallTransportError as e:
            logger.error(f"Call request {entry_id} failed in transit: {e}")
            return self.log.resolve(entry_id, CallStatus.ERROR, CONNECTIVITY_ERROR_MESSAGE)
        finally:
            self.pending.pop(entry_id, None)

        status = CallStatus.SUCCESS if response.success else CallStatus.ERROR
        entry = self.log.resolve(entry_id, status, response.message)
        logger.info(f"Call request {entry_id} resolved as {status.value}")
        if response.success:
            self.form.reset()
        return entry

    async def wait_all(self) -> None:
        """Wait for every in-flight request to resolve."""
        while self.pending:
            await asyncio.gather(*self.pending.values())
