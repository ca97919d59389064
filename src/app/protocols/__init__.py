"""Protocolos e contratos do core da aplicação."""

from .http_client import HiperHttpClientProtocol
from .models import ForwardedOrderResponse
from .order_forwarder import OrderForwarderProtocol
from .payload_builder import OrderPayloadBuilderProtocol

__all__ = [
    "ForwardedOrderResponse",
    "HiperHttpClientProtocol",
    "OrderForwarderProtocol",
    "OrderPayloadBuilderProtocol",
]
