"""
HTTP Client Module

Base-address bound API client with centralized error logging.
"""

from .client import ApiClient, ClientConfig, RequestSpec, DEFAULT_HEADERS
from .errors import (
    ConfigurationError,
    ErrorKind,
    RequestError,
    ResponseError,
    TransportError,
    classify,
)
from .result import Err, Ok, Result

__all__ = [
    "ApiClient",
    "ClientConfig",
    "RequestSpec",
    "DEFAULT_HEADERS",
    "ConfigurationError",
    "ErrorKind",
    "RequestError",
    "ResponseError",
    "TransportError",
    "classify",
    "Err",
    "Ok",
    "Result",
]
