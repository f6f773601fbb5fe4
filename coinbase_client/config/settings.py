from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Coinbase API Configuration
    coinbase_base_url: str = Field(default="https://api.coinbase.com")
    coinbase_api_version: str = Field(default="2016-08-09")
    coinbase_accept_language: str = Field(default="en")
    coinbase_timeout: float = Field(default=30.0, gt=0)

    # API key credentials
    coinbase_api_key: Optional[str] = Field(default=None)
    coinbase_api_secret: Optional[str] = Field(default=None)

    # OAuth2 credentials
    coinbase_client_id: Optional[str] = Field(default=None)
    coinbase_client_secret: Optional[str] = Field(default=None)
    coinbase_access_token: Optional[str] = Field(default=None)
    coinbase_refresh_token: Optional[str] = Field(default=None)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("coinbase_base_url")
    @classmethod
    def validate_base_url(cls, v):
        """Strip trailing slash so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Global settings instance
settings = Settings()
