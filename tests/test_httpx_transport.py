"""Tests for the httpx-backed transport."""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from saferpay.engine.errors import ProviderError, TransportError
from saferpay.engine.gateway import SaferpayGateway
from saferpay.transport.base import HttpResponse
from saferpay.transport.httpx_transport import HttpxTransport

URL = "https://test.saferpay.example/hosting/CreatePayInit.asp"
FORM = {"Content-Type": "application/x-www-form-urlencoded"}


class TestHttpxTransport:
    def test_returns_status_and_text(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=URL, text="https://www.saferpay.com/vt2/Pay.aspx")

        response = HttpxTransport().send("POST", URL, "AMOUNT=1095", FORM)

        assert response == HttpResponse(200, "https://www.saferpay.com/vt2/Pay.aspx")

    def test_sends_body_and_headers(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=URL, text="OK")

        HttpxTransport().send("POST", URL, "AMOUNT=1095&DESCRIPTION=B%C3%BCcher", FORM)

        request = httpx_mock.get_request()
        assert request.content == b"AMOUNT=1095&DESCRIPTION=B%C3%BCcher"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    def test_non_200_is_returned_not_raised(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=URL, status_code=503, text="unavailable")

        response = HttpxTransport().send("POST", URL, "", FORM)

        assert response.status_code == 503
        assert response.content == "unavailable"

    def test_timeout_maps_to_transport_error(self, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError) as exc:
            HttpxTransport(timeout=2.5).send("POST", URL, "", FORM)

        assert exc.value.status_code is None
        assert "2.5" in str(exc.value)

    def test_connection_error_maps_to_transport_error(self, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc:
            HttpxTransport().send("POST", URL, "", FORM)

        assert exc.value.status_code is None
        assert isinstance(exc.value.__cause__, httpx.ConnectError)


class TestGatewayOverHttpx:
    def test_provider_error_through_real_transport(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=URL, text="ERROR: invalid merchant")
        gateway = SaferpayGateway(HttpxTransport(), base_url="https://test.saferpay.example/hosting/")

        with pytest.raises(ProviderError):
            gateway.send("CreatePayInit.asp", "ACCOUNTID=1")

    def test_status_error_through_real_transport(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=URL, status_code=500)
        gateway = SaferpayGateway(HttpxTransport(), base_url="https://test.saferpay.example/hosting/")

        with pytest.raises(TransportError) as exc:
            gateway.send("CreatePayInit.asp", "ACCOUNTID=1")
        assert exc.value.status_code == 500
