"""
Token encoder.

Builds `base64url(header).base64url(payload).base64url(signature)` from
caller claims with PyJWT. The codec, not the caller, is authoritative for
timing: any `iat`/`exp` in the input claims are overwritten.
"""

import logging
from datetime import UTC, datetime
from typing import Any, Mapping, Optional

import jwt
from pydantic import ValidationError

from .claims import invalid_claim_keys, validate_claims
from .clock import SystemClock
from .encoding import ALGORITHM, Secret, secret_bytes
from .errors import ClaimTypeError
from .interfaces import Clock
from .view import TokenView

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = 360


class IssuedToken(TokenView):
    """A freshly signed token together with the claims it carries."""

    __slots__ = ()

    def __init__(self, token: str, claims: Mapping[str, Any]):
        self._set(
            token,
            datetime.fromtimestamp(claims["iat"], tz=UTC),
            datetime.fromtimestamp(claims["exp"], tz=UTC),
            dict(claims),
        )


def issue(
    secret: Secret,
    claims: Optional[Mapping[str, Any]] = None,
    lifetime_seconds: int = DEFAULT_LIFETIME,
    *,
    clock: Optional[Clock] = None
) -> IssuedToken:
    """
    Create an HS256-signed token.

    Args:
        secret: HMAC key material (str is UTF-8 encoded)
        claims: Mapping of str to int/float/bool/str values
        lifetime_seconds: Seconds until expiry; negative values yield an
            already-expired token
        clock: Time source, defaults to the system clock

    Returns:
        IssuedToken exposing the token string, iat/exp and claims

    Raises:
        ClaimTypeError: If claims are not a mapping of str to scalar values
        TypeError: If secret or lifetime_seconds have the wrong type
    """
    if not isinstance(lifetime_seconds, int) or isinstance(lifetime_seconds, bool):
        raise TypeError("lifetime_seconds must be an integer")

    key = secret_bytes(secret)
    if not key:
        logger.warning("Signing token with an empty secret")

    try:
        payload = validate_claims(claims if claims is not None else {})
    except ValidationError as e:
        raise ClaimTypeError(f"Claims must map str to int, float, bool or str: {invalid_claim_keys(e)}") from e

    issued_at = int((clock or SystemClock()).now())
    payload["iat"] = issued_at
    payload["exp"] = issued_at + lifetime_seconds

    token = jwt.encode(payload, key, algorithm=ALGORITHM)

    logger.debug(f"Issued token with claims {sorted(payload)} expiring at {payload['exp']}")
    return IssuedToken(token, payload)


def encode(
    secret: Secret,
    claims: Optional[Mapping[str, Any]] = None,
    lifetime_seconds: int = DEFAULT_LIFETIME,
    *,
    clock: Optional[Clock] = None
) -> str:
    """Create an HS256-signed token and return the compact string (see issue())."""
    return str(issue(secret, claims, lifetime_seconds, clock=clock))
