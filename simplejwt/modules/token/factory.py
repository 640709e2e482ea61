"""
Token codec factory.

The composition root: reads configuration and returns a ready TokenCodec.
"""

import logging
from typing import Optional

from .codec import TokenCodec
from .interfaces import Clock
from ...config.provider import ConfigProvider

logger = logging.getLogger(__name__)


class TokenCodecFactory:
    """Builds TokenCodec instances from a configuration provider."""

    @staticmethod
    def build(config_provider: ConfigProvider, clock: Optional[Clock] = None) -> TokenCodec:
        """
        Build a codec.

        Args:
            config_provider: Configuration provider
            clock: Optional time source override, mainly for tests

        Returns:
            Configured TokenCodec
        """
        token_config = config_provider.get_token_config()
        logger.info(f"Building token codec with default lifetime {token_config.default_lifetime}s")
        return TokenCodec(clock=clock, default_lifetime=token_config.default_lifetime)

    @staticmethod
    def build_from_env(clock: Optional[Clock] = None) -> TokenCodec:
        """Build a codec configured from SIMPLEJWT_* environment variables."""
        from ...config.provider import EnvConfigProvider
        return TokenCodecFactory.build(EnvConfigProvider(), clock=clock)
