"""
Token codec facade.

Binds a clock and a default lifetime so callers only pass the secret and
the claims. Holds no other state and is safe to share across threads.
"""

from typing import Any, Mapping, Optional

from .clock import SystemClock
from .decoder import ValidatedToken, decode
from .encoder import DEFAULT_LIFETIME, IssuedToken, encode, issue
from .encoding import Secret
from .interfaces import Clock


class TokenCodec:
    """Issues and validates HS256 tokens against an injected clock."""

    def __init__(self, clock: Optional[Clock] = None, default_lifetime: int = DEFAULT_LIFETIME):
        """
        Initialize the codec.

        Args:
            clock: Time source, defaults to the system clock
            default_lifetime: Lifetime in seconds used when encode() gets none
        """
        self.clock = clock or SystemClock()
        self.default_lifetime = default_lifetime

    def encode(
        self,
        secret: Secret,
        claims: Optional[Mapping[str, Any]] = None,
        lifetime_seconds: Optional[int] = None
    ) -> str:
        if lifetime_seconds is None:
            lifetime_seconds = self.default_lifetime
        return encode(secret, claims, lifetime_seconds, clock=self.clock)

    def decode(self, token: str, secret: Secret) -> ValidatedToken:
        return decode(token, secret, clock=self.clock)

    def issue(
        self,
        secret: Secret,
        claims: Optional[Mapping[str, Any]] = None,
        lifetime_seconds: Optional[int] = None
    ) -> IssuedToken:
        """Like encode(), but keep the issued claims and timestamps alongside the string."""
        if lifetime_seconds is None:
            lifetime_seconds = self.default_lifetime
        return issue(secret, claims, lifetime_seconds, clock=self.clock)
