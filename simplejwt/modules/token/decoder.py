"""
Token decoder and validator.

ValidatedToken runs every check in its constructor, in a fixed order, and
either returns a fully validated object or raises a TokenError subclass.
There is no partially validated state to observe.

PyJWT parses the header and verifies the HMAC. Expiry is checked here
against the injected clock, so PyJWT's own wall-clock time checks are off.
"""

import logging
from datetime import UTC, datetime
from typing import Any, Dict, Optional

import jwt
from pydantic import ValidationError

from .claims import invalid_claim_keys, validate_claims
from .clock import SystemClock
from .encoding import ALGORITHM, TOKEN_TYPE, Secret, is_canonical, is_segment, secret_bytes
from .errors import (
    AlgorithmError,
    ExpiredError,
    MissingClaimError,
    SignatureError,
    StructureError,
    TokenError,
    TokenTypeError,
)
from .interfaces import Clock
from .view import TokenView

logger = logging.getLogger(__name__)

# Registered-claim checks PyJWT would otherwise apply to ordinary claims.
_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


def _split(token: Any) -> tuple[str, str, str]:
    if not isinstance(token, str):
        raise StructureError(f"Token must be a string, not {type(token).__name__}")

    parts = token.split(".")
    if len(parts) != 3:
        raise StructureError(f"Token must have 3 segments, found {len(parts)}")

    header_b64, payload_b64, signature_b64 = parts
    if not header_b64 or not payload_b64:
        raise StructureError("Token header and payload segments must not be empty")
    # An empty signature is allowed through here; it fails the MAC check.
    if not all(is_segment(part) for part in parts):
        raise StructureError("Token segments must be unpadded base64url")

    return header_b64, payload_b64, signature_b64


def _header(token: str) -> Dict[str, Any]:
    try:
        return jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as e:
        raise StructureError("Token header is not a valid JSON object") from e


def _verified_payload(token: str, signature_b64: str, secret: Secret) -> Dict[str, Any]:
    if not is_canonical(signature_b64):
        raise SignatureError("Signature failed to validate")
    try:
        return jwt.decode(token, secret_bytes(secret), algorithms=[ALGORITHM], options=_DECODE_OPTIONS)
    except jwt.InvalidSignatureError as e:
        raise SignatureError("Signature failed to validate") from e
    except jwt.DecodeError as e:
        raise StructureError("Token payload is not a valid JSON object") from e


def _timestamp(claims: Dict[str, Any], name: str) -> tuple[float, datetime]:
    value = claims[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StructureError(f"Claim '{name}' must be a number of epoch seconds")
    try:
        return value, datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise StructureError(f"Claim '{name}' is out of range") from e


class ValidatedToken(TokenView):
    """
    Read-only view over a token string that passed every check.

    Validation order:
    1. Three segments, header/payload non-empty, base64url alphabet
    2. Header is a JSON object with typ == JWT and alg == HS256
    3. HMAC-SHA256 over the received header.payload bytes matches
    4. Payload is a JSON object of scalar claims
    5. `exp` then `iat` are present
    6. Both are epoch-second numbers
    7. Current time is before `exp`
    """

    __slots__ = ()

    def __init__(self, token: str, secret: Secret, clock: Optional[Clock] = None):
        _, _, signature_b64 = _split(token)

        header = _header(token)
        if header.get("typ") != TOKEN_TYPE:
            raise TokenTypeError(f"Token type {header.get('typ')!r} is not {TOKEN_TYPE}")
        if header.get("alg") != ALGORITHM:
            raise AlgorithmError(f"Token algorithm {header.get('alg')!r} is not {ALGORITHM}")

        payload = _verified_payload(token, signature_b64, secret)
        try:
            claims = validate_claims(payload)
        except ValidationError as e:
            raise StructureError(f"Token claims must be scalar values: {invalid_claim_keys(e)}") from e

        if "exp" not in claims:
            raise MissingClaimError("exp")
        if "iat" not in claims:
            raise MissingClaimError("iat")
        exp, expires_at = _timestamp(claims, "exp")
        _, issued_at = _timestamp(claims, "iat")

        if exp <= (clock or SystemClock()).now():
            raise ExpiredError(expires_at)

        self._set(token, issued_at, expires_at, claims)


def decode(token: str, secret: Secret, *, clock: Optional[Clock] = None) -> ValidatedToken:
    """
    Parse and validate a token string.

    Args:
        token: Compact token as received
        secret: HMAC key material used at encode time
        clock: Time source, defaults to the system clock

    Returns:
        ValidatedToken

    Raises:
        TokenError: One of StructureError, TokenTypeError, AlgorithmError,
            SignatureError, MissingClaimError, ExpiredError
    """
    try:
        return ValidatedToken(token, secret, clock)
    except TokenError as e:
        logger.debug(f"Rejected token: {type(e).__name__}")
        raise
