"""OpenAI realtime session service."""

import logging
from typing import Any

import httpx

from ..models.session import SessionConfig

logger = logging.getLogger(__name__)


class SessionProxyError(Exception):
    """Session creation failed; the message is returned to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamRejectedError(SessionProxyError):
    """The realtime API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"OpenAI API error: {body}")
        self.status_code = status_code
        self.body = body


class UpstreamTransportError(SessionProxyError):
    """The realtime API could not be reached or sent an unreadable response."""


class RealtimeSessionService:
    """Service for creating OpenAI realtime sessions."""

    def __init__(
        self,
        api_key: str,
        url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def create_session(self, config: SessionConfig) -> Any:
        """Create a realtime session and return the upstream JSON unchanged."""
        try:
            async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
                response = await client.post(
                    self.url,
                    json=config.model_dump(),
                    headers=self.headers,
                )
                if not response.is_success:
                    raise UpstreamRejectedError(response.status_code, response.text)
                return response.json()
        except SessionProxyError:
            raise
        except Exception as e:
            # Network errors, bad URLs and bodies that are not valid JSON
            raise UpstreamTransportError(str(e)) from e
