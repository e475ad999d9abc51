"""
Common test fixtures shared by all modules.

Provides factory functions for:
- ApiClient wired to a StubTransport
- RuntimeConfig
- requests exceptions shaped like real transport failures
"""

from typing import Any, Optional

import requests

from ivr_core.config import HttpConfig, RuntimeConfig, TelnyxConfig
from ivr_core.http import ApiClient
from ivr_core.testing import StubTransport


API_BASE = "https://api.example.com"


def make_client(
    base_address: str = API_BASE,
    **kwargs: Any,
) -> tuple[ApiClient, StubTransport]:
    """Create an ApiClient whose session answers from a fresh StubTransport."""
    client = ApiClient(base_address, **kwargs)
    stub = StubTransport().install(client.session)
    return client, stub


def make_runtime_config(
    environment: str = "test",
    api_base_url: str = API_BASE,
    timeout: Optional[float] = None,
    allow_insecure_tls: bool = False,
) -> RuntimeConfig:
    """Create a RuntimeConfig for tests."""
    return RuntimeConfig(
        environment=environment,
        api_base_url=api_base_url,
        base_url="https://test-server.example.com",
        admin_token="test_admin_token",
        http=HttpConfig(timeout=timeout, allow_insecure_tls=allow_insecure_tls),
        telnyx=TelnyxConfig(
            api_key="test_key_12345",
            connection_id="test_connection_id",
            caller_id="+15551234567",
        ),
    )


def make_http_error(
    status: int = 500,
    body: bytes = b'{"error": "db down"}',
    url: str = API_BASE + "/users",
) -> requests.HTTPError:
    """Create an HTTPError carrying a response, as raise_for_status does."""
    request = requests.Request("POST", url).prepare()
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.encoding = "utf-8"
    response.url = url
    response.request = request
    return requests.HTTPError(f"{status} Server Error for url: {url}", response=response)
