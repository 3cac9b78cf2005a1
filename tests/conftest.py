"""Shared test fixtures."""

import pytest

from saferpay.engine.driver import TransactionDriver
from saferpay.engine.gateway import SaferpayGateway

from tests.helpers import BASE_URL, RecordingLogger, StubTransport


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def gateway(transport, recorder):
    return SaferpayGateway(transport=transport, base_url=BASE_URL, logger=recorder)


@pytest.fixture
def driver(gateway, recorder):
    return TransactionDriver(gateway, logger=recorder)
