"""
Abstract HTTP transport interface.

The gateway only needs one thing from the network: send a request and hand
back status code and body. Keeping that behind this interface lets the
httpx implementation be swapped for a stub in tests, or for whatever HTTP
stack the embedding application already runs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status and decoded body of an HTTP exchange."""

    status_code: int
    content: str


class Transport(ABC):
    """Abstract base class for HTTP transports."""

    @abstractmethod
    def send(self, method: str, url: str, body: str, headers: dict[str, str]) -> HttpResponse:
        """
        Perform a single HTTP request.

        Implementations return non-2xx responses as-is; status validation is
        the gateway's job.

        Raises:
            TransportError: When no response was received at all
                (status_code=None).
        """
        ...
