import logging
import logging.config
import sys
from typing import Dict, Any, List
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    log_http: bool = False,
) -> None:
    """Configure the ``coinbase_client`` loggers.

    The root logger is left alone so applications keep their own setup.

    Args:
        log_level: Level for client loggers
        log_file: Optional path of a rotating log file
        log_http: Also emit httpx request logs at the same level
    """
    handler_names: List[str] = ["console"]
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": sys.stderr,
            "formatter": "client",
        },
    }

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": "client",
        }
        handler_names.append("file")

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"client": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": {
            "coinbase_client": {
                "level": log_level,
                "handlers": handler_names,
                "propagate": False,
            },
            "httpx": {
                "level": log_level if log_http else "WARNING",
                "handlers": handler_names,
                "propagate": False,
            },
        },
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``coinbase_client`` namespace."""
    if name.startswith("coinbase_client"):
        return logging.getLogger(name)
    return logging.getLogger(f"coinbase_client.{name}")


def mask_sensitive_data(data: str, visible: int = 4) -> str:
    """Keep the first and last ``visible`` characters of a secret."""
    if not data:
        return ""
    if len(data) <= visible * 2:
        return "*" * len(data)
    return data[:visible] + "*" * (len(data) - visible * 2) + data[-visible:]
