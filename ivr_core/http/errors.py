"""
HTTP Request Errors

Classification of failed requests into three mutually exclusive kinds:

1. Response errors: the remote peer answered with a failure status
2. Transport errors: a request went out but no response came back
3. Configuration errors: the request never reached the network
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Kind of request failure, in classification priority order."""
    RESPONSE = "response"
    TRANSPORT = "transport"
    CONFIGURATION = "configuration"


def classify(error: BaseException) -> ErrorKind:
    """
    Pick the kind of a request failure.

    A response wins over a request; anything carrying neither is a
    configuration error.
    """
    if getattr(error, "response", None) is not None:
        return ErrorKind.RESPONSE
    if getattr(error, "request", None) is not None:
        return ErrorKind.TRANSPORT
    return ErrorKind.CONFIGURATION


def decode_body(response: Any) -> Any:
    """Decode a response payload: JSON when possible, text otherwise."""
    if response is None or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def describe_request(request: Any) -> str:
    """Short description of an outgoing request (``METHOD URL``)."""
    method = getattr(request, "method", None) or "?"
    url = getattr(request, "url", None) or "?"
    return f"{method} {url}"


class RequestError(Exception):
    """Base class for classified request failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def from_exception(cls, error: BaseException) -> "RequestError":
        """Build the classified record for ``error``, chained to it."""
        kind = classify(error)
        record: RequestError
        if kind is ErrorKind.RESPONSE:
            response = error.response  # type: ignore[attr-defined]
            record = ResponseError(
                str(error),
                status_code=response.status_code,
                body=decode_body(response),
            )
        elif kind is ErrorKind.TRANSPORT:
            record = TransportError(
                str(error),
                request=describe_request(error.request),  # type: ignore[attr-defined]
            )
        else:
            record = ConfigurationError(str(error))
        record.__cause__ = error
        return record


class ResponseError(RequestError):
    """The peer returned a failure response."""

    kind = ErrorKind.RESPONSE

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(RequestError):
    """The request was sent but no response arrived."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, request: str = "") -> None:
        super().__init__(message)
        self.request = request


class ConfigurationError(RequestError):
    """The request failed before any network interaction."""

    kind = ErrorKind.CONFIGURATION
