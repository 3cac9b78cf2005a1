from saferpay.transport.base import HttpResponse, Transport
from saferpay.transport.httpx_transport import HttpxTransport

__all__ = ["HttpResponse", "Transport", "HttpxTransport"]
