"""Conector Hiper — adapter de saída para a API de pedidos do Hiper."""

from .errors import HiperApiError, extract_error_details
from .http_client import HiperHttpClient, create_hiper_http_client
from .models import HiperCliente, HiperImpostos, HiperItem, HiperOrder

__all__ = [
    "HiperApiError",
    "HiperCliente",
    "HiperHttpClient",
    "HiperImpostos",
    "HiperItem",
    "HiperOrder",
    "create_hiper_http_client",
    "extract_error_details",
]
