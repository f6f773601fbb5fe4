"""Data models for the Coinbase API."""

from coinbase_client.models.credentials import (
    APIKeyCredentials,
    OAuthCredentials,
    ClientCredentials,
)
from coinbase_client.models.responses import (
    TokenRefreshResult,
    Price,
)

__all__ = [
    "APIKeyCredentials",
    "OAuthCredentials",
    "ClientCredentials",
    "TokenRefreshResult",
    "Price",
]
