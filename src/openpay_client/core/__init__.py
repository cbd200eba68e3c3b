"""
Core primitives: parameter encoding, search filters, error classification,
the JSON transport and resource binding.
"""

from .config import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
)
from .encoding import RequestParams, encode_params, encode_value
from .environment import build_environment
from .errors import (
    ClassifiedError,
    DeserializationError,
    EncodingError,
    ErrorCategory,
    OpenpayError,
    classify_response,
    classify_transport_failure,
)
from .operations import ResourceOperations, ResourceSpec
from .search import SearchParams, search
from .transport import JsonTransportClient

__all__ = [
    "ClassifiedError",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DeserializationError",
    "EncodingError",
    "ErrorCategory",
    "JsonTransportClient",
    "OpenpayError",
    "RequestParams",
    "ResourceOperations",
    "ResourceSpec",
    "SearchParams",
    "build_environment",
    "classify_response",
    "classify_transport_failure",
    "encode_params",
    "encode_value",
    "load_client_config",
    "search",
]
