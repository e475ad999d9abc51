"""
Pytest configuration and shared fixtures for IVR core tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Bootstraps the test environment (.env.test plus default credentials)
3. Silences console logging for the whole run
4. Restores mocks and environment variables after every test
5. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

from ivr_core.logs import quiet_console
from ivr_core.testing import TestEnvironment, isolated_test

_common = importlib.import_module("fixtures.common")

make_client = _common.make_client


# =============================================================================
# Test Run Bootstrap
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def test_env():
    """Resolved test environment, injected into tests that need settings."""
    env = TestEnvironment.bootstrap(_PROJECT_ROOT / ".env.test")
    with quiet_console():
        yield env


@pytest.fixture(autouse=True)
def _isolate_test():
    """Stop leftover patches and restore os.environ after each test."""
    with isolated_test():
        yield


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def runtime_config(test_env):
    """RuntimeConfig built from the bootstrapped test environment."""
    return test_env.to_runtime_config()


@pytest.fixture
def client_and_stub():
    """ApiClient for https://api.example.com with a StubTransport mounted."""
    client, stub = make_client()
    yield client, stub
    client.close()


@pytest.fixture
def api_client(client_and_stub):
    return client_and_stub[0]


@pytest.fixture
def stub(client_and_stub):
    return client_and_stub[1]


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
