"""
IVR Core

Upstream API client, runtime configuration and logging for the IVR backend.
"""

from .http import ApiClient, RequestError, ResponseError, TransportError, ConfigurationError
from .config import RuntimeConfig

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "RequestError",
    "ResponseError",
    "TransportError",
    "ConfigurationError",
    "RuntimeConfig",
]
