"""HTTP client module for the Coinbase API."""

from coinbase_client.client.http_client import HTTPClient
from coinbase_client.client.authenticated_client import (
    AuthenticatedHTTPClient,
    TOKEN_REFRESHED_EVENT,
)
from coinbase_client.client.exceptions import (
    CoinbaseError,
    CredentialsError,
    HTTPStatusError,
    ValidationError,
    AuthenticationError,
    AuthExpiredError,
    AuthorizationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    RefreshFailureError,
    InvalidResponseError,
    TransportError,
    TimeoutError,
    ConnectionError,
    create_http_error,
)

__all__ = [
    "HTTPClient",
    "AuthenticatedHTTPClient",
    "TOKEN_REFRESHED_EVENT",
    "CoinbaseError",
    "CredentialsError",
    "HTTPStatusError",
    "ValidationError",
    "AuthenticationError",
    "AuthExpiredError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "RefreshFailureError",
    "InvalidResponseError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "create_http_error",
]
