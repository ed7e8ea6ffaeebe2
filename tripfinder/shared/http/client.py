"""
httpx client for the discovery/detail service.

Wraps a single AsyncClient and unwraps the service's response envelope:

    {"success": bool, "data": ..., "message": str?}

Failures are classified into TransportError, ApplicationError and
ParseError so callers never have to inspect raw responses.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from tripfinder.shared.config import ClientConfig, DEFAULT_CONFIG
from tripfinder.shared.errors import ApplicationError, ParseError, TransportError


logger = logging.getLogger(__name__)


class ServiceClient:
    """Adapter for the discovery/detail HTTP service."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            # Timeout(None) disables connect/read/write/pool timeouts
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=httpx.Timeout(self.config.timeout_seconds),
            )
        return self._client

    async def get_data(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        fallback_message: str = "Request failed",
    ) -> Any:
        """
        GET a path and return the envelope's data value.

        Args:
            path: Path relative to the configured base URL
            params: Flat query parameters (all plain strings)
            fallback_message: Message used when the service supplies none

        Returns:
            The "data" member of a success envelope (may be None)

        Raises:
            TransportError: Non-2xx status or network failure
            ApplicationError: Envelope with success=false
            ParseError: Body is not a JSON object envelope
        """
        client = self._get_client()
        _log = f"[client=service] [path={path}] "

        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            logger.warning(f"{_log}Network failure: {e!r}")
            raise TransportError(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"{_log}Non-success status | status={response.status_code}")
            raise TransportError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(f"{_log}Body is not valid JSON")
            raise ParseError(fallback_message) from e

        if not isinstance(body, dict):
            logger.warning(f"{_log}Envelope is not an object | type={type(body).__name__}")
            raise ParseError(fallback_message)

        if not body.get("success"):
            message = body.get("message") or fallback_message
            logger.info(f"{_log}Service reported failure | message={message}")
            raise ApplicationError(str(message))

        return body.get("data")

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
