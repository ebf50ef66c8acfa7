"""
Error Definitions

One exception family per component boundary, all rooted at AnthropicError:

- TransportError: the request never produced an HTTP response
- APIError: the server answered with a non-success status
- DecodeError: a response body could not be turned into the expected type
- StreamError: a server-sent-event stream was malformed or cut short
- RequestValidationError: request parameters were structurally incomplete
"""

import json
from typing import Any


class AnthropicError(Exception):
    """Base class for every error raised by anthropic-kit."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ============================================================================
# Transport
# ============================================================================


class TransportError(AnthropicError):
    """Connection, TLS or protocol failure before a response was received."""


class TransportTimeoutError(TransportError):
    """The request timed out."""


# ============================================================================
# API
# ============================================================================


class APIError(AnthropicError):
    """
    Non-success HTTP status returned by the API.

    Carries the vendor error payload when the body was decodable,
    otherwise the raw body text.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_type: str | None = None,
        body: Any = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.body = body
        self.request_id = request_id

    def __str__(self) -> str:
        kind = f" {self.error_type}" if self.error_type else ""
        return f"[{self.status_code}{kind}] {self.message}"


class BadRequestError(APIError):
    pass


class AuthenticationError(APIError):
    pass


class PermissionDeniedError(APIError):
    pass


class NotFoundError(APIError):
    pass


class RequestTooLargeError(APIError):
    pass


class RateLimitError(APIError):
    pass


class InternalServerError(APIError):
    pass


class OverloadedError(InternalServerError):
    pass


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    413: RequestTooLargeError,
    429: RateLimitError,
    529: OverloadedError,
}


def make_api_error(
    status_code: int,
    body: bytes,
    request_id: str | None = None,
) -> APIError:
    """
    Build the APIError subclass matching a failed response.

    The API reports failures as {"type": "error", "error": {"type": ..., "message": ...}}.
    Anything else is kept verbatim as text.
    """
    text = body.decode("utf-8", errors="replace")
    error_type: str | None = None
    message = text or f"HTTP {status_code}"
    parsed: Any = text

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        parsed = text
    else:
        error = parsed.get("error") if isinstance(parsed, dict) else None
        if isinstance(error, dict):
            error_type = error.get("type")
            message = error.get("message") or message

    if status_code in _STATUS_ERRORS:
        cls = _STATUS_ERRORS[status_code]
    elif status_code >= 500:
        cls = InternalServerError
    else:
        cls = APIError

    return cls(
        message,
        status_code=status_code,
        error_type=error_type,
        body=parsed,
        request_id=request_id,
    )


# ============================================================================
# Decode
# ============================================================================


class DecodeError(AnthropicError):
    """A response body did not match the expected shape."""


class MalformedJSONError(DecodeError):
    def __init__(self, message: str, *, body: bytes) -> None:
        super().__init__(message)
        self.body = body


class SchemaMismatchError(DecodeError):
    """Well-formed JSON that is missing a required field or has a wrong type."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.errors = errors or []


# ============================================================================
# Stream
# ============================================================================


class StreamError(AnthropicError):
    """A server-sent-event stream could not be decoded to completion."""


class MalformedFrameError(StreamError):
    pass


class TruncatedStreamError(StreamError):
    """The connection closed before a terminal event was received."""


# ============================================================================
# Validation
# ============================================================================


class RequestValidationError(AnthropicError):
    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ParamsAlreadySentError(RequestValidationError):
    """A parameters value was passed to a second send."""
