"""Result of a single bridge request.

BridgeClient.request() returns one of these instead of deciding for the
caller whether a failed request should be fatal:

- Success: the parsed response body
- TransportFailure: the network or HTTP error that stopped the request
"""

from dataclasses import dataclass
from typing import Any, Union

from core.errors import TransportError


@dataclass(frozen=True)
class Success:
    """Request completed and the body was parsed."""
    data: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.data

    def unwrap_or(self, default: Any) -> Any:
        return self.data


@dataclass(frozen=True)
class TransportFailure:
    """Request failed before a usable body was received."""
    method: str
    url: str
    cause: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the failure as a TransportError."""
        raise TransportError(self.method, self.url, self.cause) from self.cause

    def unwrap_or(self, default: Any) -> Any:
        return default


RequestResult = Union[Success, TransportFailure]
