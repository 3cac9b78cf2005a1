"""
Logging sink used by the gateway and the transaction driver.

Any object with ``debug`` and ``critical`` methods accepting the
``logging.Logger`` call signature works as a sink, a stdlib logger included.
Structured context is passed through ``extra``:

    logger.critical("request failed with status code %s", 500, extra={"statuscode": 500})

When nothing is injected, each gateway/driver gets its own NullLogger.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class LoggerLike(Protocol):
    """Minimum logging surface the client relies on."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class NullLogger:
    """Sink that discards every record."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass


def resolve_logger(logger: Optional[LoggerLike]) -> LoggerLike:
    return logger if logger is not None else NullLogger()
