"""
Twilio service for placing outbound calls.
Speaks a synthesized script to the recipient through inline TwiML.
"""

import asyncio
import functools
import logging
from typing import Callable, Optional
from twilio.rest import Client
from twilio.base.exceptions import TwilioException, TwilioRestException

from agentic_caller.config.settings import TwilioCredentials
from agentic_caller.core.exceptions import ConfigurationError
from agentic_caller.core.markup import escape_for_markup
from agentic_caller.models.outcomes import CallAccepted, CallRejected, ProviderOutcome

logger = logging.getLogger(__name__)

MISSING_CONFIGURATION_MESSAGE = (
    "Missing Twilio configuration. Set TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, and TWILIO_FROM_NUMBER."
)
GENERIC_REJECTION_MESSAGE = "Twilio did not accept the call request."


class TwilioService:
    """Service class for Twilio call placement."""

    def __init__(
        self,
        credentials: Optional[TwilioCredentials],
        voice: str = "Polly.Joey",
        language: str = "en-US",
        client_factory: Callable[[str, str], Client] = Client,
    ):
        """
        Initialize the Twilio service.

        Args:
            credentials: Account SID, auth token and caller ID, or None if not configured
            voice: Twilio <Say> voice
            language: Twilio <Say> language
            client_factory: Builds the REST client from (account_sid, auth_token)
        """
        self.credentials = credentials
        self.voice = voice
        self.language = language
        self._client_factory = client_factory
        self._client: Optional[Client] = None

    def _require_credentials(self) -> TwilioCredentials:
        credentials = self.credentials
        if (
            credentials is None
            or not credentials.account_sid
            or not credentials.auth_token
            or not credentials.from_number
        ):
            raise ConfigurationError(MISSING_CONFIGURATION_MESSAGE)
        return credentials

    def _get_client(self, credentials: TwilioCredentials) -> Client:
        if self._client is None:
            self._client = self._client_factory(credentials.account_sid, credentials.auth_token)
        return self._client

    def create_call_twiml(self, script: str) -> str:
        """
        Create TwiML that reads the script aloud.

        Args:
            script: Plain-text script

        Returns:
            str: The TwiML XML string
        """
        return (
            f'<Response>'
            f'<Say voice="{self.voice}" language="{self.language}">{escape_for_markup(script)}</Say>'
            f'</Response>'
        )

    async def place_call(self, to_number: str, script: str) -> ProviderOutcome:
        """
        Place one outbound call that speaks the script.

        Args:
            to_number: Destination number in E.164 format
            script: Plain-text script to speak

        Returns:
            CallAccepted with the call SID, or CallRejected with the provider's reason

        Raises:
            ConfigurationError: If Twilio credentials or the caller ID are missing
        """
        credentials = self._require_credentials()
        twiml = self.create_call_twiml(script)

        logger.info(f"Placing call to {to_number} from {credentials.from_number}")
        try:
            client = self._get_client(credentials)
            loop = asyncio.get_running_loop()
            call = await loop.run_in_executor(
                None,
                functools.partial(
                    client.calls.create,
                    to=to_number,
                    from_=credentials.from_number,
                    twiml=twiml,
                ),
            )
        except TwilioRestException as e:
            logger.error(f"Twilio rejected call to {to_number}: {e.status} {e.msg}")
            return CallRejected(reason=e.msg or GENERIC_REJECTION_MESSAGE)
        except TwilioException as e:
            logger.error(f"Twilio error placing call to {to_number}: {e}")
            return CallRejected(reason=str(e) or GENERIC_REJECTION_MESSAGE)
        except Exception:
            logger.exception(f"Unexpected error placing call to {to_number}")
            return CallRejected(reason=GENERIC_REJECTION_MESSAGE)

        logger.info(f"Call initiated successfully. Call SID: {call.sid}")
        return CallAccepted(external_id=str(call.sid))
