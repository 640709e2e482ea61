"""Token error taxonomy.

Every failure raised by the codec derives from TokenError, so callers that
only care about "valid or not" can catch a single class. None of these are
transient; a rejected token stays rejected.
"""

from datetime import datetime


class TokenError(ValueError):
    """Base exception for all token codec errors."""


class StructureError(TokenError):
    """Token is not three base64url segments of JSON objects with scalar claims."""


class TokenTypeError(TokenError):
    """Header `typ` is not JWT."""


class AlgorithmError(TokenError):
    """Header `alg` is not HS256."""


class SignatureError(TokenError):
    """Recomputed MAC does not match the transmitted signature."""


class MissingClaimError(TokenError):
    """A required registered claim (`exp` or `iat`) is absent."""

    def __init__(self, claim: str):
        super().__init__(f"Token has no '{claim}' claim")
        self.claim = claim


class ExpiredError(TokenError):
    """Current time is at or past the token's `exp`."""

    def __init__(self, expired_at: datetime):
        super().__init__(f"Token expired at {expired_at.isoformat()}")
        self.expired_at = expired_at


class UnknownClaimError(TokenError):
    """Requested claim key is not present in a validated token."""

    def __init__(self, claim: str):
        super().__init__(f"Token has no claim named '{claim}'")
        self.claim = claim


class ClaimTypeError(TokenError, TypeError):
    """Claims passed to the encoder are not a mapping of str to scalar values."""
