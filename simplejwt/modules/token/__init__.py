"""
Token Module - Black Box Interface

Purpose: Issue and validate compact HS256 tokens
Interface: encode(), issue(), decode(), IssuedToken, ValidatedToken, TokenCodec
Hidden: PyJWT wire handling, validation order

Secrets are passed on every call and never retained.
"""

from .clock import FixedClock, SystemClock
from .codec import TokenCodec
from .decoder import ValidatedToken, decode
from .encoder import DEFAULT_LIFETIME, IssuedToken, encode, issue
from .encoding import ALGORITHM, TOKEN_TYPE
from .errors import (
    AlgorithmError,
    ClaimTypeError,
    ExpiredError,
    MissingClaimError,
    SignatureError,
    StructureError,
    TokenError,
    TokenTypeError,
    UnknownClaimError,
)
from .factory import TokenCodecFactory
from .interfaces import Clock, TokenClaims

__all__ = [
    "ALGORITHM",
    "TOKEN_TYPE",
    "DEFAULT_LIFETIME",
    "Clock",
    "SystemClock",
    "FixedClock",
    "TokenCodec",
    "TokenCodecFactory",
    "IssuedToken",
    "ValidatedToken",
    "TokenClaims",
    "encode",
    "issue",
    "decode",
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
