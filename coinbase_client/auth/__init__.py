"""Authentication strategies for the Coinbase client."""

from coinbase_client.auth.base import AuthStrategy, encode_body
from coinbase_client.auth.api_key import APIKeyAuth
from coinbase_client.auth.oauth import OAuthAuth

__all__ = ["AuthStrategy", "APIKeyAuth", "OAuthAuth", "encode_body"]
