"""
Request Result

Success/failure sum type returned by ``ApiClient.try_request``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import RequestError


@dataclass(frozen=True)
class Ok:
    """Successful request carrying the decoded response body."""
    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed request carrying the classified error."""
    error: RequestError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the classified error."""
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok, Err]
