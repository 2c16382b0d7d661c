"""Protocol definitions for the Duolingo client.

Defines the transport interface so tests and callers can substitute their own
implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from duolingo_client.transport import JsonResponse


class JsonTransportProtocol(Protocol):
    """Protocol for a JSON-over-HTTP transport."""

    async def fetch(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        json: Any = None,
    ) -> JsonResponse:
        """Issue a request and return its parsed JSON response.

        Args:
            method: HTTP method
            url: Absolute request URL, query string included
            headers: Optional request headers
            json: Optional JSON-serializable request body

        Returns:
            JsonResponse with status, headers and parsed body

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.TransportError: On network failures
        """
        ...
