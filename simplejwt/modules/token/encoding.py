"""
Wire-level checks for compact tokens.

Signing and verification are done by PyJWT. This module adds the stricter
segment rules the validator enforces on top of it: URL-safe base64 without
"=" padding (RFC 7515), and a signature segment that is the canonical
encoding of its bytes.
"""

import binascii
import re
from typing import Union

from jwt.utils import base64url_decode, base64url_encode

from .errors import StructureError

ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"

Secret = Union[bytes, str]

_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def secret_bytes(secret: Secret) -> bytes:
    """Normalize caller key material to bytes (str is UTF-8 encoded)."""
    if isinstance(secret, bytes):
        return secret
    if isinstance(secret, str):
        return secret.encode("utf-8")
    raise TypeError(f"Secret must be bytes or str, not {type(secret).__name__}")


def is_segment(segment: str) -> bool:
    """Check that a segment only uses the unpadded base64url alphabet."""
    return _SEGMENT_PATTERN.fullmatch(segment) is not None


def b64url_encode(data: bytes) -> str:
    return base64url_encode(data).decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """
    Decode an unpadded base64url segment.

    Raises:
        StructureError: If the segment is not valid unpadded base64url
    """
    # A remainder of 1 can never come out of an encoder.
    if not is_segment(segment) or len(segment) % 4 == 1:
        raise StructureError("Token segment is not valid base64url")

    try:
        return base64url_decode(segment)
    except (binascii.Error, ValueError) as e:
        raise StructureError("Token segment is not valid base64url") from e


def is_canonical(segment: str) -> bool:
    """
    Check that a segment re-encodes to itself.

    The last character of a segment can carry unused bits; two strings that
    differ only there decode to the same bytes.
    """
    return b64url_encode(b64url_decode(segment)) == segment
