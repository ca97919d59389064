"""Testes do parse do corpo do webhook Mercus."""

from __future__ import annotations

import pytest

from api.connectors.mercus import InvalidJsonError, parse_webhook_body


def test_parse_object() -> None:
    assert parse_webhook_body(b'{"id_pedido": "1"}') == {"id_pedido": "1"}


def test_parse_empty_body_returns_empty_object() -> None:
    assert parse_webhook_body(b"") == {}


def test_parse_non_object_is_returned_as_is() -> None:
    assert parse_webhook_body(b"[1, 2]") == [1, 2]


@pytest.mark.parametrize("raw", [b"{id_pedido: 1}", b"\xff\xfe", b"{"])
def test_parse_invalid_json_raises(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_webhook_body(raw)
