"""Core HAL resource engine: handle, resolution, mutation, transport."""

from .config import create_transport_from_env, load_env_config, load_env_credentials
from .errors import (
    EmbeddedPathError,
    ErrorCode,
    HALError,
    HALModelValidationError,
    HALParseError,
    InvalidDepth,
    InvalidMethod,
    MissingKey,
    MissingLink,
    OutOfBounds,
    ServerRejected,
    TransportFailure,
)
from .links import LinkTable, get_embedded, get_link, get_link_href, get_link_title
from .mutation import MUTATING_METHODS
from .paths import Field, Index, lookup, parse_path, walk
from .resource import HALResource
from .transport import (
    DEFAULT_HEADERS,
    HALTransport,
    TransportConfig,
    TransportResponse,
)

__all__ = [
    # Handle
    "HALResource",
    "MUTATING_METHODS",
    # Transport
    "HALTransport",
    "TransportConfig",
    "TransportResponse",
    "DEFAULT_HEADERS",
    # Exceptions
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
    # Links and paths
    "LinkTable",
    "get_link",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "Index",
    "Field",
    "parse_path",
    "walk",
    "lookup",
    # Config helpers
    "load_env_config",
    "load_env_credentials",
    "create_transport_from_env",
]
