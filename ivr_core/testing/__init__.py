"""
Testing Helpers

Test-run bootstrap and a scripted ``requests`` transport.
"""

from .environment import (
    DEFAULT_ENV_FILE,
    DEFAULT_TEST_ENV,
    TestEnvironment,
    isolated_test,
)
from .transport import StubFailure, StubResponse, StubTransport

__all__ = [
    "DEFAULT_ENV_FILE",
    "DEFAULT_TEST_ENV",
    "TestEnvironment",
    "isolated_test",
    "StubFailure",
    "StubResponse",
    "StubTransport",
]
