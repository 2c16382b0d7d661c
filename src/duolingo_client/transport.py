"""JSON-over-HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from duolingo_client.logging_utils import create_logger

logger = create_logger("duolingo_client.transport")


@dataclass(frozen=True)
class JsonResponse:
    """Successful response with its body already parsed."""

    status: int
    headers: httpx.Headers
    body: Any


class JsonHttpTransport:
    """Fetches JSON documents through a shared httpx client."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
        """
        self._client = http_client

    async def fetch(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        json: Any = None,
    ) -> JsonResponse:
        """Issue a request and parse the response body as JSON.

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.TransportError: On network failures
        """
        request_headers = {"Accept": "application/json", **(headers or {})}

        logger.debug(
            "Sending request",
            extra={"method": method, "url": url, "has_body": json is not None},
        )

        response = await self._client.request(method, url, headers=request_headers, json=json)
        response.raise_for_status()

        logger.debug(
            "Received response",
            extra={"method": method, "url": url, "status": response.status_code},
        )

        return JsonResponse(
            status=response.status_code,
            headers=response.headers,
            body=response.json(),
        )
