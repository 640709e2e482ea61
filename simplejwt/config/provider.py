"""Configuration provider following Black Box Design principles."""
import logging
import os
from dataclasses import dataclass
from typing import Protocol

DEFAULT_TOKEN_LIFETIME = 360
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


@dataclass(frozen=True)
class TokenConfig:
    """Token codec configuration."""
    default_lifetime: int = DEFAULT_TOKEN_LIFETIME


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_token_config(self) -> TokenConfig:
        """Get token codec configuration."""
        ...

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        ...


class StaticConfigProvider:
    """Provider returning fixed config objects, for embedding and tests."""

    def __init__(self, token: TokenConfig = TokenConfig(), logging_config: LoggingConfig = LoggingConfig()):
        self.token = token
        self.logging_config = logging_config

    def get_token_config(self) -> TokenConfig:
        return self.token

    def get_logging_config(self) -> LoggingConfig:
        return self.logging_config


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_token_config(self) -> TokenConfig:
        """Get token configuration from environment variables."""
        raw = os.getenv("SIMPLEJWT_DEFAULT_LIFETIME", str(DEFAULT_TOKEN_LIFETIME)).strip()
        try:
            lifetime = int(raw)
        except ValueError:
            raise ConfigError(
                f"SIMPLEJWT_DEFAULT_LIFETIME must be an integer number of seconds, got {raw!r}"
            ) from None

        if lifetime <= 0:
            raise ConfigError("SIMPLEJWT_DEFAULT_LIFETIME must be positive")

        return TokenConfig(default_lifetime=lifetime)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        level = os.getenv("SIMPLEJWT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ConfigError(f"SIMPLEJWT_LOG_LEVEL {level!r} is not a logging level")
        return LoggingConfig(level=level)
