"""Coinbase Python Client

An asyncio client for the Coinbase v2 REST API that provides:
- API key authentication with HMAC-SHA256 request signing
- OAuth2 bearer authentication with automatic token refresh
- A hook for persisting rotated OAuth tokens
- User, account, address and transaction endpoints
"""

__version__ = "0.1.0"

from coinbase_client.config.logging import setup_logging, get_logger
from coinbase_client.client.authenticated_client import TOKEN_REFRESHED_EVENT
from coinbase_client.client.exceptions import (
    CoinbaseError,
    HTTPStatusError,
    AuthExpiredError,
    RefreshFailureError,
    InvalidResponseError,
    TransportError,
)
from coinbase_client.coinbase import CoinbaseClient

__all__ = [
    "CoinbaseClient",
    "TOKEN_REFRESHED_EVENT",
    "CoinbaseError",
    "HTTPStatusError",
    "AuthExpiredError",
    "RefreshFailureError",
    "InvalidResponseError",
    "TransportError",
    "setup_logging",
    "get_logger",
    "__version__",
]
