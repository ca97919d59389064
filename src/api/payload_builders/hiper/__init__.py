"""Builders de payload para a API do Hiper."""

from api.payload_builders.hiper.order import (
    HiperOrderPayloadBuilder,
    build_hiper_payload,
    map_mercus_to_hiper,
)

__all__ = [
    "HiperOrderPayloadBuilder",
    "build_hiper_payload",
    "map_mercus_to_hiper",
]
