"""
Client-side activity log.
Keeps the submitted call requests of this session, newest first, and lets
each in-flight request resolve its own entry by id.
"""

import enum
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from agentic_caller.models.schemas import CallRequest

QUEUED_MESSAGE = "Sending call request..."


class CallStatus(enum.Enum):
    """Status of a submitted call request."""
    QUEUED = "queued"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CallLogEntry:
    """One submitted call request as shown in the activity feed."""
    id: str
    created_at: datetime
    status: CallStatus
    recipient_name: str
    recipient_number: str
    objective: str
    notes: Optional[str]
    response_message: str

    @classmethod
    def queued(cls, request: CallRequest) -> "CallLogEntry":
        """Snapshot a validated request as a new queued entry."""
        return cls(
            id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            status=CallStatus.QUEUED,
            recipient_name=request.recipient_name,
            recipient_number=request.recipient_number,
            objective=request.objective,
            notes=request.notes,
            response_message=QUEUED_MESSAGE,
        )


class ActivityLog:
    """
    Ordered, in-memory log of call requests.

    The entries are held in a tuple that is swapped for a new one on every
    change, so readers always see a complete sequence.
    """

    def __init__(self):
        self._entries: Tuple[CallLogEntry, ...] = ()

    @property
    def entries(self) -> Tuple[CallLogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: CallLogEntry) -> None:
        """Prepend a new entry."""
        if self.get(entry.id) is not None:
            raise ValueError(f"Duplicate log entry id: {entry.id}")
        self._entries = (entry,) + self._entries

    def get(self, entry_id: str) -> Optional[CallLogEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def resolve(self, entry_id: str, status: CallStatus, message: str) -> Optional[CallLogEntry]:
        """
        Move a queued entry to its terminal status.

        Args:
            entry_id: Id of the entry to update
            status: CallStatus.SUCCESS or CallStatus.ERROR
            message: Message to show for the entry

        Returns:
            The updated entry, or None if no queued entry has that id
        """
        if status is CallStatus.QUEUED:
            raise ValueError("An entry can only be resolved to success or error")

        resolved = None
        entries = []
        for entry in self._entries:
            if entry.id == entry_id and entry.status is CallStatus.QUEUED:
                entry = replace(entry, status=status, response_message=message)
                resolved = entry
            entries.append(entry)
        self._entries = tuple(entries)
        return resolved

    def reset(self) -> None:
        self._entries = ()

    @property
    def total_calls(self) -> int:
        return len(self._entries)

    @property
    def successful_calls(self) -> int:
        return sum(1 for entry in self._entries if entry.status is CallStatus.SUCCESS)


DEFAULT_FORM: Dict[str, str] = {
    "callerName": "Agentic Assistant",
    "callerNumber": "",
    "recipientName": "",
    "recipientNumber": "",
    "objective": "",
    "notes": "",
}


class CallForm:
    """Values and field errors of the call request form."""

    def __init__(self, **values: str):
        self.values: Dict[str, str] = dict(DEFAULT_FORM)
        self.errors: Dict[str, str] = {}
        for field, value in values.items():
            self.update(field, value)

    def update(self, field: str, value: str) -> None:
        """Set a field and clear any error shown for it."""
        if field not in DEFAULT_FORM:
            raise KeyError(f"Unknown form field: {field}")
        self.values[field] = value
        self.errors.pop(field, None)

    def reset(self) -> None:
        self.values = dict(DEFAULT_FORM)
        self.errors = {}
