from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .transport import TransportResponse


class ErrorCode(IntEnum):
    GENERAL = 0
    RESPONSE = 10
    REQUEST = 11


class HALError(Exception):
    """Base error for all failures while talking to a HAL server."""

    code: ErrorCode = ErrorCode.GENERAL

    def __init__(self, message: str = "HAL Error", code: Optional[ErrorCode] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class TransportFailure(HALError):
    """Network-level failure (DNS, refused connection, timeout)."""

    code = ErrorCode.REQUEST

    def __init__(self, message: str, *, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class HALParseError(HALError):
    code = ErrorCode.RESPONSE


class ServerRejected(HALError):
    code = ErrorCode.RESPONSE

    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.response_json = response_json
        self.response_text = response_text

    @classmethod
    def from_response(cls, response: "TransportResponse") -> "ServerRejected":
        response_json: Optional[Dict[str, Any]] = None
        message = "server did not succeed"

        if response.body:
            response_json = response.body
            # Spring Data REST reports "message", Spring Boot error pages "error"
            message = (
                response.body.get("message") or response.body.get("error") or message
            )

        return cls(
            status_code=response.status_code,
            method=response.method,
            url=response.url,
            message=str(message),
            response_json=response_json,
            response_text=response.text,
        )


class MissingLink(HALError):
    def __init__(self, relation: str, message: Optional[str] = None):
        super().__init__(message or f"Link {relation!r} does not exist")
        self.relation = relation


class InvalidMethod(HALError, ValueError):
    code = ErrorCode.REQUEST

    def __init__(self, method: str, allowed):
        super().__init__(
            f"Method {method!r} is invalid (only {', '.join(allowed)})"
        )
        self.method = method


class InvalidDepth(HALError, ValueError):
    def __init__(self, depth: int):
        super().__init__(f"Resolution depth must be >= 0, got {depth}")
        self.depth = depth


class EmbeddedPathError(HALError, LookupError):
    """Dot-path traversal into _embedded did not resolve."""

    def __init__(self, message: str, *, path: str, segment: Any):
        super().__init__(message)
        self.path = path
        self.segment = segment


class OutOfBounds(EmbeddedPathError):
    pass


class MissingKey(EmbeddedPathError):
    pass


class HALModelValidationError(HALError):
    pass


__all__ = [
    "ErrorCode",
    "HALError",
    "TransportFailure",
    "HALParseError",
    "ServerRejected",
    "MissingLink",
    "InvalidMethod",
    "InvalidDepth",
    "EmbeddedPathError",
    "OutOfBounds",
    "MissingKey",
    "HALModelValidationError",
]
