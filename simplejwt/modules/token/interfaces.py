"""Token codec interfaces following Black Box Design principles."""
from datetime import datetime
from typing import Any, Protocol

from .encoding import Secret


class Clock(Protocol):
    """Protocol for time sources - allows deterministic tests."""

    def now(self) -> float:
        """Return the current time as epoch seconds."""
        ...


class TokenClaims(Protocol):
    """Accessors common to issued and validated tokens."""

    @property
    def expiration(self) -> datetime:
        ...

    @property
    def issued_at(self) -> datetime:
        ...

    def get_claim(self, key: str) -> Any:
        """Return a claim value; raises UnknownClaimError if absent."""
        ...

    def __str__(self) -> str:
        ...


class TokenVerifier(Protocol):
    """Protocol for token validation - allows swappable implementations."""

    def decode(self, token: str, secret: Secret) -> TokenClaims:
        """
        Validate a token.

        Args:
            token: Compact token string
            secret: HMAC key material

        Returns:
            A validated token view; raises TokenError on any failure
        """
        ...
