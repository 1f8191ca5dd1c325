"""Chat endpoint clients.

This module hides the design decision of how a message history reaches
the backend and how its reply is interpreted. The backend itself is an
external collaborator: it receives ``{"messages": [...]}`` and answers
``{"content": [{"text": ...}]}`` on success or ``{"error": ...}`` on failure.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from .models import ChatReply, ChatRequest, Turn


class ChatEndpointError(Exception):
    """Raised when the endpoint cannot be reached or answers with an error status."""


def parse_reply(data: Any) -> str | None:
    """Extract the reply text from a decoded response body.

    Args:
        data: Decoded JSON body

    Returns:
        Text of the first content item, or None when the body carries no
        usable text (error bodies, missing or empty content)
    """
    if not isinstance(data, dict):
        return None
    try:
        reply = ChatReply.model_validate(data)
    except ValidationError:
        return None
    return reply.text


class ChatEndpoint(ABC):
    """Abstract base class for chat endpoints.

    Implementations send the outbound turns and return the decoded
    response body untouched; interpreting it is left to ``parse_reply``.

    Supports async context manager protocol for resource cleanup:
        async with endpoint:
            data = await endpoint.send(turns)
    """

    _debug_callback: Callable[[str, str, str], None] | None = None

    def set_debug_callback(self, callback: Callable[[str, str, str], None] | None) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Function(level, component, message), or None to disable
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "HTTP", message)

    @abstractmethod
    async def send(self, messages: Sequence[Turn]) -> Any:
        """Send one request carrying the given turns.

        Args:
            messages: Turns to send, oldest first

        Returns:
            Decoded JSON response body

        Raises:
            ChatEndpointError: If the exchange fails at the transport level
        """
        pass

    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "ChatEndpoint":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the endpoint when leaving the ``async with`` block.

        A TUI that is torn down by Ctrl+C can stop the event loop before
        the connection pool closes; that RuntimeError is ignored, any
        other one is re-raised.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise


class HttpChatEndpoint(ChatEndpoint):
    """JSON-over-HTTP chat endpoint.

    Hidden design decisions:
    - HTTP client setup and connection reuse
    - Request body encoding
    - Mapping transport failures to ChatEndpointError
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize the endpoint.

        Args:
            url: Full URL of the chat route
            timeout: Timeout in seconds, None disables it
            **client_kwargs: Additional kwargs for httpx.AsyncClient
                (e.g. ``transport`` for tests)
        """
        self._url = url
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"Content-Type": "application/json"},
            **client_kwargs
        )

    @property
    def url(self) -> str:
        """Get the endpoint URL."""
        return self._url

    async def send(self, messages: Sequence[Turn]) -> Any:
        request = ChatRequest(messages=list(messages))
        try:
            self._debug("debug", f"POST {self._url} ({len(request.messages)} messages)")
            response = await self._client.post(self._url, json=request.to_payload())
            self._debug("debug", f"Response status {response.status_code}")
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ChatEndpointError(
                f"Endpoint answered {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ChatEndpointError(f"Request to {self._url} failed: {e}") from e
        except ValueError as e:
            # Body was not valid JSON
            raise ChatEndpointError(f"Invalid JSON from {self._url}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
