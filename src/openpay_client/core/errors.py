"""
Error taxonomy for the Openpay client and the classifier that builds it.

Three failure families reach callers:

* :class:`EncodingError` - a parameter object was incomplete; nothing was sent.
* :class:`ClassifiedError` - the gateway (or the network in front of it)
  rejected the call. ``category`` tells callers how to react.
* :class:`DeserializationError` - a successful response did not have the
  shape the client expected.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional

import requests

__all__ = [
    "ClassifiedError",
    "DeserializationError",
    "EncodingError",
    "ErrorCategory",
    "OpenpayError",
    "classify_response",
    "classify_transport_failure",
]


class OpenpayError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(OpenpayError):
    """Raised when a request cannot be built from the supplied parameters."""


class DeserializationError(OpenpayError):
    """Raised when a 2xx response body does not match the expected entity."""

    def __init__(self, message: str, *, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body


class ErrorCategory(enum.Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    SERVER_FAULT = "server_fault"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UNKNOWN = "unknown"


_STATUS_TO_CATEGORY = {
    400: ErrorCategory.BAD_REQUEST,
    401: ErrorCategory.UNAUTHORIZED,
    403: ErrorCategory.UNAUTHORIZED,
    404: ErrorCategory.NOT_FOUND,
    409: ErrorCategory.CONFLICT,
    429: ErrorCategory.RATE_LIMITED,
}


class ClassifiedError(OpenpayError):
    """
    A failed API call, reduced to a category plus the gateway's diagnostics.

    ``http_status`` is ``None`` when no response was received at all.
    """

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        *,
        http_status: Optional[int] = None,
        error_code: Optional[int] = None,
        request_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.message = message
        self.http_status = http_status
        self.error_code = error_code
        self.request_id = request_id
        self.description = description

    @property
    def retryable(self) -> bool:
        return self.category is ErrorCategory.SERVICE_UNAVAILABLE

    def __str__(self) -> str:
        parts = [self.category.value]
        if self.http_status is not None:
            parts.append(f"http={self.http_status}")
        if self.error_code is not None:
            parts.append(f"code={self.error_code}")
        return f"[{' '.join(parts)}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"ClassifiedError(category={self.category!r}, http_status={self.http_status!r}, "
            f"error_code={self.error_code!r}, message={self.message!r})"
        )


def _category_for_status(status: int) -> ErrorCategory:
    if status in _STATUS_TO_CATEGORY:
        return _STATUS_TO_CATEGORY[status]
    if 500 <= status <= 599:
        return ErrorCategory.SERVER_FAULT
    return ErrorCategory.UNKNOWN


def _coerce_code(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def classify_response(
    status: int,
    body: Optional[Any],
    *,
    raw_text: Optional[str] = None,
) -> ClassifiedError:
    """
    Build a :class:`ClassifiedError` from an HTTP status and the parsed body.

    The category depends only on ``status``. ``body`` contributes the gateway
    error code and description when it is a JSON object; anything else falls
    back to ``raw_text`` for the message.
    """
    category = _category_for_status(status)
    error_code: Optional[int] = None
    description: Optional[str] = None
    request_id: Optional[str] = None

    if isinstance(body, Mapping):
        error_code = _coerce_code(body.get("error_code", body.get("code")))
        raw_description = body.get("description")
        if raw_description is not None:
            description = str(raw_description)
        raw_request_id = body.get("request_id")
        if raw_request_id is not None:
            request_id = str(raw_request_id)

    if description:
        message = description
    elif raw_text and raw_text.strip():
        message = raw_text.strip()
    else:
        message = f"Gateway responded with HTTP {status}"

    return ClassifiedError(
        category,
        message,
        http_status=status,
        error_code=error_code,
        request_id=request_id,
        description=description,
    )


def classify_transport_failure(exc: requests.RequestException) -> ClassifiedError:
    """Map a transport-level failure (no usable response) to SERVICE_UNAVAILABLE."""
    if isinstance(exc, requests.Timeout):
        message = f"Request timed out: {exc}"
    elif isinstance(exc, requests.ConnectionError):
        message = f"Could not reach the gateway: {exc}"
    else:
        message = f"Transport failure: {exc}"
    return ClassifiedError(ErrorCategory.SERVICE_UNAVAILABLE, message)
