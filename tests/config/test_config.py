import logging

import pytest
from pydantic import ValidationError

from coinbase_client.config.logging import get_logger, mask_sensitive_data, setup_logging
from coinbase_client.config.settings import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("COINBASE_BASE_URL", "COINBASE_API_VERSION", "COINBASE_API_KEY", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.coinbase_base_url == "https://api.coinbase.com"
        assert settings.coinbase_api_version == "2016-08-09"
        assert settings.coinbase_accept_language == "en"
        assert settings.coinbase_timeout == 30.0
        assert settings.coinbase_api_key is None
        assert settings.log_level == "INFO"

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("COINBASE_API_KEY", "env_key")
        monkeypatch.setenv("COINBASE_ACCESS_TOKEN", "env_token")
        monkeypatch.setenv("COINBASE_BASE_URL", "https://sandbox.test.com/")

        settings = Settings(_env_file=None)

        assert settings.coinbase_api_key == "env_key"
        assert settings.coinbase_access_token == "env_token"
        assert settings.coinbase_base_url == "https://sandbox.test.com"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, coinbase_timeout=0)


class TestLogging:

    def test_get_logger_namespace(self):
        assert get_logger("client").name == "coinbase_client.client"
        assert get_logger("coinbase_client.auth.api_key").name == "coinbase_client.auth.api_key"

    def test_mask_sensitive_data(self):
        assert mask_sensitive_data("abcd1234efgh") == "abcd****efgh"
        assert mask_sensitive_data("short") == "*****"
        assert mask_sensitive_data("") == ""

    def test_setup_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "client.log"

        setup_logging("DEBUG", log_file=str(log_file))
        get_logger("test").debug("hello")

        logger = logging.getLogger("coinbase_client")
        assert logger.level == logging.DEBUG
        assert log_file.parent.exists()

        assert logging.getLogger("httpx").level == logging.WARNING

        for handler in logger.handlers:
            handler.close()
        setup_logging("WARNING")

    def test_setup_logging_http(self):
        setup_logging("DEBUG", log_http=True)

        assert logging.getLogger("httpx").level == logging.DEBUG

        setup_logging("WARNING")
