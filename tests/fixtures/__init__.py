"""
Test fixtures package for IVR core tests.

This package provides factory functions for creating test objects.

Usage:
    from fixtures import make_client, make_runtime_config

    def test_something():
        client, stub = make_client()
        stub.add("GET", "https://api.example.com/users/1", json={"id": 1})
"""

from .common import (
    API_BASE,
    make_client,
    make_runtime_config,
    make_http_error,
)

__all__ = [
    "API_BASE",
    "make_client",
    "make_runtime_config",
    "make_http_error",
]
