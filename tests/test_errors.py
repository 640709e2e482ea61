from datetime import UTC, datetime

import pytest

from simplejwt.modules.token.errors import (
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


@pytest.mark.parametrize(
    "error_cls",
    [
        StructureError,
        TokenTypeError,
        AlgorithmError,
        SignatureError,
        MissingClaimError,
        ExpiredError,
        UnknownClaimError,
        ClaimTypeError,
    ],
)
def test_all_errors_are_token_errors(error_cls):
    assert issubclass(error_cls, TokenError)
    assert issubclass(error_cls, ValueError)


def test_token_type_error_does_not_shadow_builtin():
    assert not issubclass(TokenTypeError, TypeError)
    assert issubclass(ClaimTypeError, TypeError)


def test_missing_claim_carries_name():
    err = MissingClaimError("exp")
    assert err.claim == "exp"
    assert str(err) == "Token has no 'exp' claim"


def test_unknown_claim_carries_name():
    err = UnknownClaimError("role")
    assert err.claim == "role"
    assert "role" in str(err)


def test_expired_error_carries_instant():
    when = datetime(2024, 1, 1, tzinfo=UTC)
    err = ExpiredError(when)

    assert err.expired_at == when
    assert "2024-01-01T00:00:00+00:00" in str(err)
