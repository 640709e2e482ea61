"""
Shared pytest fixtures for SimpleJWT tests.

This module provides common fixtures including:
- A fixed clock so expiry tests never sleep
- A shared secret and a codec bound to the fixed clock
- make_token: build tokens by hand, bypassing the encoder
"""

import base64
import hashlib
import hmac
import json
import os
import sys
from typing import Any, Callable, Dict, Optional, Union

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simplejwt.modules.token import FixedClock, TokenCodec


NOW = 1_700_000_000
SECRET = b"correct-horse-battery-staple-0123456789"


# =============================================================================
# Hand-built tokens
# =============================================================================

def b64url(data: bytes) -> str:
    """Unpadded base64url, computed independently of the codec."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def build_token(
    header: Union[Dict[str, Any], str],
    payload: Union[Dict[str, Any], str],
    secret: Optional[bytes] = SECRET,
) -> str:
    """
    Assemble a token from raw parts.

    Args:
        header: Header dict, or a pre-serialized JSON string
        payload: Payload dict, or a pre-serialized JSON string
        secret: Key to sign with; None leaves the signature segment empty

    Returns:
        Compact token string
    """
    header_json = header if isinstance(header, str) else json.dumps(header)
    payload_json = payload if isinstance(payload, str) else json.dumps(payload)
    signing_input = f"{b64url(header_json.encode())}.{b64url(payload_json.encode())}"
    if secret is None:
        return f"{signing_input}."
    mac = hmac.new(secret, signing_input.encode("ascii"), hashlib.sha256).digest()
    return f"{signing_input}.{b64url(mac)}"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def secret() -> bytes:
    return SECRET


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def codec(fixed_clock) -> TokenCodec:
    return TokenCodec(clock=fixed_clock)


@pytest.fixture
def make_token() -> Callable[..., str]:
    """
    Fixture returning build_token.

    Usage:
        def test_missing_exp(make_token, codec, secret):
            token = make_token({"alg": "HS256", "typ": "JWT"}, {"iat": 1})
            with pytest.raises(MissingClaimError):
                codec.decode(token, secret)
    """
    return build_token


@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    """A payload that validates against the fixed clock."""
    return {"sub": "user-42", "role": "admin", "iat": NOW, "exp": NOW + 360}


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "interop: Tests checking wire compatibility with PyJWT"
    )
    config.addinivalue_line(
        "markers", "security: Tests covering tampering and timing properties"
    )
