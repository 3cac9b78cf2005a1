"""
Gateway to the Saferpay hosting endpoints.

Every phase goes through ``send``, which posts a form-encoded body and only
returns the response content once it has passed both checks:

  1. HTTP status is exactly 200
  2. The body does not contain the literal text "ERROR"

Saferpay reports application errors inside 200 responses ("ERROR: ..."),
so the second check matters as much as the first. It scans the whole body,
which means a legitimate value containing "ERROR" is rejected too.

Path, request body and response body are logged at debug level before the
checks run; a failing check logs once at critical level and raises.
"""

from typing import Optional

from saferpay.audit.logger import LoggerLike, resolve_logger
from saferpay.engine.errors import ProviderError, TransportError, TransportNotConfiguredError
from saferpay.transport.base import Transport

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}
PROVIDER_ERROR_MARKER = "ERROR"


class SaferpayGateway:
    """
    Posts requests to Saferpay and validates the answers.

    Args:
        transport: HTTP transport. May be bound later via ``transport``;
            sending without one raises TransportNotConfiguredError.
        base_url: Prefix joined with each collection's request path.
        logger: Logging sink. Defaults to a private NullLogger.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        base_url: str = "",
        logger: Optional[LoggerLike] = None,
    ):
        self._transport = transport
        self._base_url = base_url
        self._logger = resolve_logger(logger)

    @property
    def transport(self) -> Optional[Transport]:
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def logger(self) -> LoggerLike:
        return self._logger

    def build_url(self, path: str) -> str:
        if not self._base_url:
            return path
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    def send(self, path: str, form_body: str) -> str:
        """
        POST ``form_body`` to ``path`` and return the validated response content.

        Raises:
            TransportNotConfiguredError: No transport bound.
            TransportError: No response, or a status other than 200.
            ProviderError: The body contains "ERROR".
        """
        if self._transport is None:
            raise TransportNotConfiguredError()

        url = self.build_url(path)
        self._logger.debug(url)
        self._logger.debug(form_body)

        try:
            response = self._transport.send("POST", url, form_body, dict(FORM_HEADERS))
        except TransportError as e:
            self._logger.critical(
                "Saferpay: request to %s failed: %s", url, e.message,
                extra={"url": url},
            )
            raise

        self._logger.debug(response.content)

        if response.status_code != 200:
            self._logger.critical(
                "Saferpay: request failed with status code %s!", response.status_code,
                extra={"statuscode": response.status_code},
            )
            raise TransportError(response.status_code)

        if PROVIDER_ERROR_MARKER in response.content:
            self._logger.critical(
                "Saferpay: request failed: %s!", response.content,
                extra={"content": response.content},
            )
            raise ProviderError(response.content)

        return response.content
