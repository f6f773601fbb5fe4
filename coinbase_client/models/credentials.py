"""Credential models for the two authentication modes."""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class APIKeyCredentials(BaseModel):
    """Static API key and secret used for HMAC request signing."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="API key identifier")
    api_secret: str = Field(..., min_length=1, repr=False, description="API secret used as HMAC key")


class OAuthCredentials(BaseModel):
    """OAuth2 client identity plus the current token pair.

    Instances are frozen; a refresh swaps in a new instance built with
    :meth:`with_tokens`.
    """

    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = Field(None, description="OAuth2 client ID")
    client_secret: Optional[str] = Field(None, repr=False, description="OAuth2 client secret")
    access_token: str = Field(..., min_length=1, repr=False, description="Current bearer token")
    refresh_token: Optional[str] = Field(None, repr=False, description="Current refresh token")

    def with_tokens(self, access_token: str, refresh_token: Optional[str]) -> "OAuthCredentials":
        """Return a copy carrying a new token pair."""
        return self.model_copy(
            update={
                "access_token": access_token,
                "refresh_token": refresh_token or self.refresh_token,
            }
        )


ClientCredentials = Union[APIKeyCredentials, OAuthCredentials]
