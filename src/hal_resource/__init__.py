"""hal_resource package exports."""

from .core import (
    DEFAULT_HEADERS,
    MUTATING_METHODS,
    HALError,
    HALModelValidationError,
    HALParseError,
    HALResource,
    HALTransport,
    InvalidDepth,
    InvalidMethod,
    LinkTable,
    MissingKey,
    MissingLink,
    OutOfBounds,
    ServerRejected,
    TransportConfig,
    TransportFailure,
    create_transport_from_env,
)
from .core.logging import setup_logging
from .models import HALDocument, Link

__all__ = [
    # Handle
    "HALResource",
    "MUTATING_METHODS",
    # Transport
    "HALTransport",
    "TransportConfig",
    "DEFAULT_HEADERS",
    "create_transport_from_env",
    # Exceptions
    "HALError",
    "TransportFailure",
    "HALParseError",
    "ServerRejected",
    "MissingLink",
    "InvalidMethod",
    "InvalidDepth",
    "OutOfBounds",
    "MissingKey",
    "HALModelValidationError",
    # Models
    "LinkTable",
    "Link",
    "HALDocument",
    # Logging
    "setup_logging",
]
