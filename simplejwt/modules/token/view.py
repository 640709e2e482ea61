"""Read-only accessors shared by issued and validated tokens."""

from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

from .errors import UnknownClaimError

ClaimValue = Union[int, float, bool, str]


class TokenView:
    """
    Immutable view over a token string and its claims.

    Subclasses fill the slots once in their constructor.
    """

    __slots__ = ("_token", "_issued_at", "_expires_at", "_claims")

    def _set(self, token: str, issued_at: datetime, expires_at: datetime, claims: Dict[str, Any]) -> None:
        self._token = token
        self._issued_at = issued_at
        self._expires_at = expires_at
        self._claims = claims

    @property
    def expiration(self) -> datetime:
        """Expiry instant (UTC)."""
        return self._expires_at

    @property
    def issued_at(self) -> datetime:
        """Issue instant (UTC)."""
        return self._issued_at

    @property
    def claims(self) -> Mapping[str, ClaimValue]:
        """All claims, including `iat` and `exp`, as a read-only mapping."""
        return MappingProxyType(self._claims)

    def get_claim(self, key: str) -> ClaimValue:
        """
        Return a claim value.

        Raises:
            UnknownClaimError: If the token carries no such claim
        """
        try:
            return self._claims[key]
        except KeyError:
            raise UnknownClaimError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._claims

    def __str__(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(issued_at={self._issued_at.isoformat()}, "
            f"expiration={self._expires_at.isoformat()}, claims={sorted(self._claims)})"
        )
