"""
HTTP client for the call endpoint.
"""

import asyncio
import logging
from typing import Any, Dict
import aiohttp
from pydantic import ValidationError

from agentic_caller.core.exceptions import CallTransportError
from agentic_caller.models.schemas import CallResponse

logger = logging.getLogger(__name__)


class CallServiceClient:
    """Posts call requests to a running Agentic Caller server."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    async def submit(self, payload: Dict[str, Any]) -> CallResponse:
        """
        Send one call request.

        Args:
            payload: Request body with camelCase keys

        Returns:
            CallResponse: The server's {success, message}, whatever the status code

        Raises:
            CallTransportError: If the server cannot be reached or the body is unreadable
        """
        url = f"{self.base_url}/api/call"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(url, json=payload) as response:
                    data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Network error calling {url}: {e}")
            raise CallTransportError(f"Network error: {e}") from e

        try:
            return CallResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected response body from {url}: {data!r}")
            raise CallTransportError("Unexpected response from call service") from e
