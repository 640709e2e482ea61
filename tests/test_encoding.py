"""Tests for the base64url segment rules layered over PyJWT."""

import pytest

from simplejwt.modules.token.encoding import (
    b64url_decode,
    b64url_encode,
    is_canonical,
    is_segment,
    secret_bytes,
)
from simplejwt.modules.token.errors import StructureError


@pytest.mark.parametrize(
    "raw, encoded",
    [
        (b"", ""),
        (b"f", "Zg"),
        (b"fo", "Zm8"),
        (b"foo", "Zm9v"),
        (b"\xfb\xff", "-_8"),
    ],
)
def test_b64url_is_unpadded_and_url_safe(raw, encoded):
    assert b64url_encode(raw) == encoded
    assert b64url_decode(encoded) == raw


@pytest.mark.parametrize("segment", ["Zg==", "Zm9v=", "+/8", "Zm 9v", "Z", "Zm9vY"])
def test_b64url_decode_rejects_bad_segments(segment):
    with pytest.raises(StructureError):
        b64url_decode(segment)


def test_is_segment():
    assert is_segment("")
    assert is_segment("abc-_XYZ019")
    assert not is_segment("abc=")
    assert not is_segment("abc\n")


def test_is_canonical():
    assert is_canonical("")
    assert is_canonical("Zg")
    assert is_canonical("Zm9v")
    # "Zh" carries a set bit in the unused tail and decodes to the same b"f"
    assert b64url_decode("Zh") == b"f"
    assert not is_canonical("Zh")


def test_is_canonical_rejects_bad_segments():
    with pytest.raises(StructureError):
        is_canonical("Z")


def test_secret_bytes():
    assert secret_bytes(b"k") == b"k"
    assert secret_bytes("kéy") == "kéy".encode("utf-8")
    with pytest.raises(TypeError):
        secret_bytes(None)
