"""OAuth2 bearer token authentication."""

from typing import Dict, Any, Optional

from coinbase_client.auth.base import AuthStrategy
from coinbase_client.models.credentials import OAuthCredentials


class OAuthAuth(AuthStrategy):
    """Attaches the current access token as a bearer header."""

    supports_refresh = True

    def __init__(self, credentials: OAuthCredentials):
        self.credentials = credentials

    @property
    def access_token(self) -> str:
        return self.credentials.access_token

    def update_credentials(self, credentials: OAuthCredentials) -> None:
        """Swap in credentials carrying a refreshed token pair."""
        self.credentials = credentials

    def get_auth_headers(
        self,
        path: str,
        method: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.credentials.access_token}"}
