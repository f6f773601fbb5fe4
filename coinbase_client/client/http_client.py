import asyncio
from typing import Dict, Any, Optional

import httpx

from coinbase_client import __version__
from coinbase_client.config.logging import get_logger, mask_sensitive_data
from coinbase_client.config.settings import settings
from coinbase_client.client.exceptions import (
    TimeoutError,
    ConnectionError,
)

logger = get_logger(__name__)


class HTTPClient:
    """Thin transport wrapper around ``httpx.AsyncClient``.

    Sends already-built requests and maps network failures to
    :class:`~coinbase_client.client.exceptions.TransportError` subclasses.
    Status codes are left to the caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        self.base_url = (base_url or settings.coinbase_base_url).rstrip("/")
        self.timeout = timeout or settings.coinbase_timeout

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": f"coinbase-python-client/{__version__}"},
            transport=transport,
        )

        logger.info(f"HTTP client initialized with base URL: {self.base_url}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
        logger.debug("HTTP client closed")

    def _sanitize_for_logging(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitize sensitive data for logging."""
        if not data:
            return {}

        sensitive_fields = [
            "authorization", "token", "password", "secret", "key", "sign",
        ]

        sanitized = {}
        for key, value in data.items():
            key_lower = key.lower()
            if any(field in key_lower for field in sensitive_fields):
                if isinstance(value, str):
                    sanitized[key] = mask_sensitive_data(value)
                else:
                    sanitized[key] = "[MASKED]"
            else:
                sanitized[key] = value

        return sanitized

    async def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ) -> httpx.Response:
        """Send a single request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute request URL
            headers: Request headers
            body: Request body, used for logging only
            content: Encoded request body

        Returns:
            The raw httpx response, whatever its status code

        Raises:
            TimeoutError: When request times out
            ConnectionError: When connection fails
        """
        log_data = {
            "method": method,
            "url": url,
            "headers": self._sanitize_for_logging(headers or {}),
        }
        if body:
            log_data["json"] = self._sanitize_for_logging(body)

        logger.debug(f"Making request: {log_data}")

        try:
            response = await self.client.request(
                method=method,
                url=url,
                headers=headers,
                content=content.encode("utf-8") if content else None,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise TimeoutError(f"Request timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Connection failed: {str(e)}") from e

        logger.debug(
            f"{method} {url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )

        return response
