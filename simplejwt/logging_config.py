"""
Logging configuration that keeps tokens out of log output.
"""

import logging
import logging.config
import re
from typing import Any, Dict

# Compact JWTs always start with a base64url-encoded '{"' header.
TOKEN_PATTERN = re.compile(r"eyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")
REDACTED = "<redacted-token>"


class TokenRedactionFilter(logging.Filter):
    """Filter that masks anything shaped like a compact token."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = TOKEN_PATTERN.sub(REDACTED, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with token redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "token_redaction": {
                "()": TokenRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["token_redaction"]
            }
        },
        "loggers": {
            "simplejwt": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the SimpleJWT logging configuration."""
    logging.config.dictConfig(get_logging_config(level))


def configure_logging_from(config_provider) -> None:
    """Apply logging configuration read from a ConfigProvider."""
    configure_logging(config_provider.get_logging_config().level)
