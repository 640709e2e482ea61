"""
SimpleJWT - compact HS256 authentication tokens

Issues and verifies self-contained tokens of the form
base64url(header).base64url(payload).base64url(HMAC-SHA256 signature).

Modules:
- token: encoder, decoder/validator, clock and error taxonomy
- middleware: FastAPI Bearer-token middleware built on the decoder
- config: environment-driven configuration
"""

from .modules.token import (
    AlgorithmError,
    ClaimTypeError,
    ExpiredError,
    FixedClock,
    IssuedToken,
    MissingClaimError,
    SignatureError,
    StructureError,
    SystemClock,
    TokenCodec,
    TokenError,
    TokenTypeError,
    UnknownClaimError,
    ValidatedToken,
    decode,
    encode,
    issue,
)

__version__ = "1.0.0"

__all__ = [
    "encode",
    "decode",
    "issue",
    "IssuedToken",
    "ValidatedToken",
    "TokenCodec",
    "SystemClock",
    "FixedClock",
    "TokenError",
    "StructureError",
    "TokenTypeError",
    "AlgorithmError",
    "SignatureError",
    "MissingClaimError",
    "ExpiredError",
    "UnknownClaimError",
    "ClaimTypeError",
]
