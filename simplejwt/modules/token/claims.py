"""Claim value model: a closed set of JSON scalars."""

from typing import Any, Dict, Union

from pydantic import StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError, confloat

# bool is listed first so True/False never validate as integers.
ClaimValue = Union[StrictBool, StrictInt, confloat(strict=True, allow_inf_nan=False), StrictStr]

_claims_adapter = TypeAdapter(Dict[StrictStr, ClaimValue])


def validate_claims(claims: Any) -> Dict[str, Any]:
    """
    Validate a claims mapping and return a fresh dict copy.

    Raises:
        pydantic.ValidationError: If a key is not a str or a value is not a
            finite int/float, bool or str
    """
    return _claims_adapter.validate_python(claims)


def invalid_claim_keys(error: ValidationError) -> str:
    """Summarize which claim keys failed validation, without echoing values."""
    keys = sorted({str(err["loc"][0]) for err in error.errors() if err["loc"]})
    return ", ".join(keys) if keys else "<claims>"
