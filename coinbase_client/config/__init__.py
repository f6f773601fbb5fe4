"""Configuration and logging for the Coinbase client."""

from coinbase_client.config.settings import Settings, settings
from coinbase_client.config.logging import setup_logging, get_logger, mask_sensitive_data

__all__ = ["Settings", "settings", "setup_logging", "get_logger", "mask_sensitive_data"]
