"""
Transport implementation on top of httpx.

A short-lived httpx.Client is opened per request, so one instance can be
shared by drivers running in different threads.
"""

import logging

import httpx

from saferpay.engine.errors import TransportError
from saferpay.transport.base import HttpResponse, Transport

logger = logging.getLogger("saferpay.transport")


class HttpxTransport(Transport):
    """Blocking transport using httpx.Client."""

    def __init__(self, timeout: float = 30.0, verify: bool = True):
        self._timeout = timeout
        self._verify = verify

    @property
    def timeout(self) -> float:
        return self._timeout

    def send(self, method: str, url: str, body: str, headers: dict[str, str]) -> HttpResponse:
        try:
            with httpx.Client(timeout=self._timeout, verify=self._verify) as client:
                response = client.request(method, url, content=body.encode("utf-8"), headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(None, f"Saferpay: request timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(None, f"Saferpay: HTTP error: {e}") from e

        logger.debug("%s %s -> %d (%d bytes)", method, url, response.status_code, len(response.content))
        return HttpResponse(status_code=response.status_code, content=response.text)
