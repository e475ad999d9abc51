"""
API Client

Thin wrapper around a ``requests`` session bound to a base address. Every
call returns the decoded response body; every failure is logged once and
re-raised unchanged.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from http.cookiejar import DefaultCookiePolicy
from typing import TYPE_CHECKING, Any, Mapping, NoReturn, Optional
from urllib.parse import urlparse

import requests

from .errors import ErrorKind, RequestError, classify, decode_body, describe_request
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from ivr_core.config import RuntimeConfig


logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings fixed at client construction.
    """
    base_address: str
    verify_tls: bool = True
    timeout: Optional[float] = None
    default_headers: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_HEADERS)
    )


@dataclass
class RequestSpec:
    """
    A single outgoing request, consumed by one ``request`` call.
    """
    method: str
    path: str
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)

    def to_kwargs(self, defaults: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Build ``requests.Session.request`` keyword arguments.

        Options are layered over method, url and headers, so a caller-supplied
        key wins on collision. The body is attached last and replaces any
        ``data`` option.
        """
        kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self.path,
            "headers": dict(self.headers),
        }
        if defaults:
            kwargs.update(defaults)
        kwargs.update(self.options)
        if self.body is not None:
            kwargs.pop("data", None)
            kwargs["json"] = self.body
        return kwargs


class ApiClient:
    """
    HTTP client for a single upstream API.

    Usage:
        client = ApiClient("https://api.example.com")

        user = client.request("GET", "/users/1")
        client.request("POST", "/users", {"name": "Bob"})
    """

    def __init__(
        self,
        base_address: str,
        *,
        timeout: Optional[float] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        environment: str = "production",
        allow_insecure_tls: bool = False,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_address: Root URL that relative paths are resolved against
            timeout: Default request timeout in seconds (None: transport default)
            default_headers: Headers sent on every request
            environment: Deployment environment name
            allow_insecure_tls: Skip certificate checks (development only)
        """
        headers = dict(DEFAULT_HEADERS)
        if default_headers:
            headers.update(default_headers)

        insecure = environment == "development" and allow_insecure_tls
        if insecure:
            logger.warning(
                "TLS certificate verification disabled. Only use this in development."
            )

        self.config = ClientConfig(
            base_address=base_address,
            verify_tls=not insecure,
            timeout=timeout,
            default_headers=headers,
        )
        self._session: Optional[requests.Session] = None
        self._session_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: "RuntimeConfig") -> "ApiClient":
        """Create a client for the API described by a runtime config."""
        return cls(
            config.api_base_url,
            timeout=config.http.timeout,
            environment=config.environment,
            allow_insecure_tls=config.http.allow_insecure_tls,
        )

    @property
    def base_address(self) -> str:
        return self.config.base_address

    @property
    def session(self) -> requests.Session:
        return self._get_session()

    def _get_session(self) -> requests.Session:
        """Lazy-create the requests session, once per client."""
        with self._session_lock:
            if self._session is None:
                session = requests.Session()
                session.headers.update(self.config.default_headers)
                session.verify = self.config.verify_tls
                # No ambient credentials: no netrc auth, no cookies kept or sent.
                session.trust_env = False
                session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
                self._session = session
            return self._session

    def _resolve_url(self, path: str) -> str:
        if urlparse(path).scheme:
            return path
        if not path:
            return self.config.base_address
        return self.config.base_address.rstrip("/") + "/" + path.lstrip("/")

    def _request_defaults(self) -> dict[str, Any]:
        if self.config.timeout is not None:
            return {"timeout": self.config.timeout}
        return {}

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Make an HTTP request and return the decoded response body.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Path relative to the base address, or an absolute URL
            body: JSON-serializable request body
            headers: Headers merged into the default set
            options: Extra ``requests`` arguments, applied last

        Returns:
            Parsed JSON body, the text body, or None for an empty body

        Raises:
            The transport's original exception, after logging it
        """
        session = self._get_session()
        try:
            spec = RequestSpec(
                method=method,
                path=path,
                body=body,
                headers=dict(headers or {}),
                options=dict(options or {}),
            )
            kwargs = spec.to_kwargs(self._request_defaults())
            kwargs["url"] = self._resolve_url(kwargs["url"])
            response = session.request(**kwargs)
            response.raise_for_status()
        except Exception as e:
            self.handle_error(e)
        return decode_body(response)

    def handle_error(self, error: BaseException) -> NoReturn:
        """
        Log a failed request and re-raise it unchanged.

        Exactly one line is logged: the response body when the peer answered,
        the outgoing request when nothing came back, the message otherwise.
        """
        kind = classify(error)
        if kind is ErrorKind.RESPONSE:
            logger.error(f"Response error: {decode_body(error.response)}")  # type: ignore[attr-defined]
        elif kind is ErrorKind.TRANSPORT:
            logger.error(f"Request error: {describe_request(error.request)}")  # type: ignore[attr-defined]
        else:
            logger.error(f"Error: {error}")
        raise error

    def try_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        """
        Make an HTTP request, returning ``Ok(body)`` or ``Err(RequestError)``.

        Failures are logged the same way as ``request``.
        """
        try:
            return Ok(self.request(method, path, body, headers, options))
        except (requests.RequestException, TypeError, ValueError) as e:
            return Err(RequestError.from_exception(e))

    def get(
        self,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return self.request("GET", path, headers=headers, options=options)

    def post(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a POST request."""
        return self.request("POST", path, body, headers=headers, options=options)

    def put(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, body, headers=headers, options=options)

    def patch(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self.request("PATCH", path, body, headers=headers, options=options)

    def delete(
        self,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path, headers=headers, options=options)

    def close(self) -> None:
        """Close the HTTP session."""
        with self._session_lock:
            if self._session:
                self._session.close()
                self._session = None

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
