"""
Runtime Configuration Module

Provides configuration loading and management for the IVR backend.
"""

from .runtime import (
    HttpConfig,
    RuntimeConfig,
    TelnyxConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "HttpConfig",
    "RuntimeConfig",
    "TelnyxConfig",
    "get_default_config",
    "set_default_config",
]
