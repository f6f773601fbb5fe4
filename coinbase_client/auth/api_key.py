"""API key authentication with HMAC-SHA256 request signing."""

import hashlib
import hmac
import time
from typing import Callable, Dict, Any, Optional

from coinbase_client.auth.base import AuthStrategy, encode_body
from coinbase_client.config.logging import get_logger
from coinbase_client.models.credentials import APIKeyCredentials

logger = get_logger(__name__)

HEADER_ACCESS_KEY = "CB-ACCESS-KEY"
HEADER_ACCESS_SIGN = "CB-ACCESS-SIGN"
HEADER_ACCESS_TIMESTAMP = "CB-ACCESS-TIMESTAMP"


class APIKeyAuth(AuthStrategy):
    """Signs every request with the API secret.

    The prehash string is ``timestamp + method + path + body``, where the
    timestamp is unix seconds read from ``clock`` at signing time.
    """

    def __init__(
        self,
        credentials: APIKeyCredentials,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize API key auth.

        Args:
            credentials: API key and secret
            clock: Returns the current unix time in seconds
        """
        self.credentials = credentials
        self.clock = clock

        logger.debug(f"API key auth initialized for key: {credentials.api_key[:4]}****")

    def sign(self, timestamp: int, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> str:
        """Compute the hex HMAC-SHA256 signature for a request."""
        message = f"{timestamp}{method}{path}{encode_body(body)}"
        return hmac.new(
            self.credentials.api_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    def get_auth_headers(
        self,
        path: str,
        method: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        timestamp = int(self.clock())
        signature = self.sign(timestamp, method, path, body)

        return {
            HEADER_ACCESS_KEY: self.credentials.api_key,
            HEADER_ACCESS_SIGN: signature,
            HEADER_ACCESS_TIMESTAMP: str(timestamp),
        }
