"""Test doubles for the transport and the logging sink."""

from dataclasses import dataclass, field
from typing import Any, Union

from saferpay.transport.base import HttpResponse, Transport

BASE_URL = "https://test.saferpay.example/hosting/"


@dataclass
class SentRequest:
    method: str
    url: str
    body: str
    headers: dict[str, str]


class StubTransport(Transport):
    """Returns queued responses in order and counts every call."""

    def __init__(self, *responses: Union[HttpResponse, Exception]):
        self.responses = list(responses)
        self.requests: list[SentRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def queue(self, status_code: int, content: str) -> "StubTransport":
        self.responses.append(HttpResponse(status_code, content))
        return self

    def send(self, method: str, url: str, body: str, headers: dict[str, str]) -> HttpResponse:
        self.requests.append(SentRequest(method, url, body, headers))
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@dataclass
class LogRecord:
    level: str
    message: str
    extra: dict[str, Any] = field(default_factory=dict)


class RecordingLogger:
    """Keeps every record so tests can assert on levels and ordering."""

    def __init__(self):
        self.records: list[LogRecord] = []

    def _record(self, level: str, msg: str, args: tuple, kwargs: dict) -> None:
        self.records.append(LogRecord(level, msg % args if args else msg, kwargs.get("extra") or {}))

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", msg, args, kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("critical", msg, args, kwargs)

    @property
    def levels(self) -> list[str]:
        return [r.level for r in self.records]

    def at(self, level: str) -> list[LogRecord]:
        return [r for r in self.records if r.level == level]
