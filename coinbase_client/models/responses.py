"""Response models for the Coinbase API."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenRefreshResult(BaseModel):
    """Result of an OAuth2 ``refresh_token`` grant."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., min_length=1, description="New bearer token")
    refresh_token: Optional[str] = Field(None, description="New refresh token")
    expires_in: Optional[int] = Field(None, description="Access token lifetime in seconds")
    token_type: Optional[str] = Field(None, description="Token type, usually 'bearer'")
    scope: Optional[str] = Field(None, description="Granted scopes")
    refreshed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the refresh response was received",
    )

    @property
    def expires_at(self) -> Optional[datetime]:
        """Absolute expiry of the new access token, for persistence."""
        if self.expires_in is None:
            return None
        return self.refreshed_at + timedelta(seconds=self.expires_in)


class Price(BaseModel):
    """Price of a currency pair."""

    amount: Decimal = Field(..., description="Price amount")
    currency: str = Field(..., description="Quote currency code")
    base: Optional[str] = Field(None, description="Base currency code")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        """Normalize currency code."""
        return v.upper()
