"""
Provider outcomes returned by the call dispatcher.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CallAccepted:
    """The provider accepted the call and returned its identifier."""
    external_id: str


@dataclass(frozen=True)
class CallRejected:
    """The provider rejected the call or could not be reached."""
    reason: str


ProviderOutcome = Union[CallAccepted, CallRejected]
