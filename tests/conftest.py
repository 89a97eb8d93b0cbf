"""
Shared test configuration and fakes.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from agentic_caller.config.settings import TwilioCredentials
from agentic_caller.services.twilio_service import TwilioService


class FakeCalls:
    """Stands in for client.calls; records every create() call."""

    def __init__(self, sid="CA0123456789abcdef", error=None):
        self.sid = sid
        self.error = error
        self.created = []

    def create(self, **kwargs):
        self.created.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(sid=self.sid)


class FakeClientFactory:
    """Builds fake Twilio clients and remembers the credentials used."""

    def __init__(self, calls):
        self.calls = calls
        self.built_with = []

    def __call__(self, account_sid, auth_token):
        self.built_with.append((account_sid, auth_token))
        return SimpleNamespace(calls=self.calls)


@pytest.fixture
def credentials():
    return TwilioCredentials(
        account_sid="AC00000000000000000000000000000000",
        auth_token="test-token",
        from_number="+15550001111",
    )


@pytest.fixture
def fake_calls():
    return FakeCalls()


@pytest.fixture
def client_factory(fake_calls):
    return FakeClientFactory(fake_calls)


@pytest.fixture
def twilio_service(credentials, client_factory):
    return TwilioService(credentials, client_factory=client_factory)


@pytest.fixture
def valid_payload():
    return {
        "callerName": "Agentic Assistant",
        "callerNumber": "",
        "recipientName": "Jamie Rivera",
        "recipientNumber": "+15559876543",
        "objective": "Confirm tomorrow's 10 AM meeting.",
        "notes": "",
    }
