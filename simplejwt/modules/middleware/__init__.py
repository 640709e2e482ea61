"""
Bearer Token Middleware Module - Black Box Interface

Purpose: Authenticate FastAPI requests carrying `Authorization: Bearer <token>`
Interface: create_bearer_token_middleware() returning a configured middleware
Hidden: Header extraction, token validation, error formatting

Validated tokens are exposed to handlers as `request.state.token`.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..token import ExpiredError, SignatureError, TokenCodec, TokenError
from ..token.interfaces import TokenVerifier
from ..token.encoding import Secret

logger = logging.getLogger(__name__)

# Client-facing messages; the exception text can quote untrusted header values.
_FAILURE_MESSAGES = {
    ExpiredError: "Authentication failed: token expired",
    SignatureError: "Authentication failed: invalid signature",
}
_DEFAULT_FAILURE_MESSAGE = "Authentication failed: invalid token"


class BearerTokenMiddleware:
    """
    HTTP middleware validating Bearer tokens with a TokenCodec.

    Register with `app.middleware("http")`; requests without a valid token
    get a 401 response and never reach the route handler.
    """

    def __init__(
        self,
        secret: Secret,
        codec: Optional[TokenVerifier] = None,
        skip_paths: Optional[Dict[str, list]] = None,
        error_format: str = "json",
        log_attempts: bool = True
    ):
        """
        Initialize Bearer token middleware.

        Args:
            secret: HMAC key material tokens were signed with
            codec: Verifier to validate with (default: TokenCodec on the system clock)
            skip_paths: Dict of {path: [methods]} to skip authentication
            error_format: Error response format ("json" or "jsonrpc")
            log_attempts: Whether to log authentication attempts
        """
        self._secret = secret
        self.codec = codec or TokenCodec()
        self.skip_paths = skip_paths or {}
        self.error_format = error_format
        self.log_attempts = log_attempts

    def should_skip_auth(self, request: Request) -> bool:
        """Check if authentication should be skipped for this request."""
        path = str(request.url.path)
        method = request.method.upper()

        if path in self.skip_paths:
            allowed_methods = self.skip_paths[path]
            if "*" in allowed_methods or method in allowed_methods:
                return True

        return False

    def extract_token(self, request: Request) -> Optional[str]:
        """Extract the raw token from the Authorization header."""
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return token.strip()

    def format_error(self, status_code: int, message: str, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Format error response based on configured format."""
        if self.error_format == "jsonrpc":
            return {
                "jsonrpc": "2.0",
                "error": {
                    "code": -32700 if status_code == 401 else -32603,
                    "message": message
                },
                "id": request_id
            }
        else:
            return {
                "error": message,
                "status": status_code
            }

    def _unauthorized(self, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content=self.format_error(401, message),
            headers={"WWW-Authenticate": "Bearer"}
        )

    async def __call__(self, request: Request, call_next):
        """Process the request through Bearer token authentication."""
        if self.should_skip_auth(request):
            if self.log_attempts:
                logger.debug(f"Skipping auth for {request.method} {request.url.path}")
            return await call_next(request)

        token = self.extract_token(request)
        if not token:
            if self.log_attempts:
                logger.warning(f"Request to {request.url.path} without Bearer token")
            return self._unauthorized("Authentication required: Bearer token not provided")

        try:
            validated = self.codec.decode(token, self._secret)
        except TokenError as e:
            if self.log_attempts:
                logger.warning(f"Rejected Bearer token for {request.url.path}: {type(e).__name__}: {e}")
            return self._unauthorized(_FAILURE_MESSAGES.get(type(e), _DEFAULT_FAILURE_MESSAGE))

        request.state.token = validated
        return await call_next(request)


def create_bearer_token_middleware(
    secret: Secret,
    codec: Optional[TokenVerifier] = None,
    skip_paths: Optional[Dict[str, list]] = None,
    error_format: str = "json",
    log_attempts: bool = True
) -> BearerTokenMiddleware:
    """
    Factory function to create Bearer token middleware.

    Args:
        secret: HMAC key material tokens were signed with
        codec: Verifier to validate with
        skip_paths: Paths to skip authentication {"/path": ["GET", "POST"]}
        error_format: "json" or "jsonrpc" error format
        log_attempts: Whether to log authentication attempts

    Returns:
        Configured BearerTokenMiddleware instance
    """
    default_skip_paths = {
        "/health": ["GET"],
    }

    if skip_paths:
        default_skip_paths.update(skip_paths)

    return BearerTokenMiddleware(
        secret=secret,
        codec=codec,
        skip_paths=default_skip_paths,
        error_format=error_format,
        log_attempts=log_attempts
    )


# Module interface - what this module provides
__all__ = [
    "BearerTokenMiddleware",
    "create_bearer_token_middleware",
]
