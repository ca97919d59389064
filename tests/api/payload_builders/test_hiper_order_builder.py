"""Testes da tradução Mercus → Hiper."""

from __future__ import annotations

from typing import Any

import pytest

from api.payload_builders.hiper import (
    HiperOrderPayloadBuilder,
    build_hiper_payload,
    map_mercus_to_hiper,
)
from api.validators.mercus import (
    MercusOrderMappingError,
    MissingOrderIdError,
    validate_mercus_order,
)


def test_example_order_maps_to_hiper(mercus_order_payload: dict[str, Any]) -> None:
    hiper = build_hiper_payload(mercus_order_payload)

    assert hiper == {
        "pedido_id": "1",
        "data_pedido": "2025-04-10T14:30:00Z",
        "cliente": {
            "codigo": "C1",
            "nome": "A",
            "endereco": "X",
            "telefone": "1",
            "email": "a@a.com",
        },
        "itens": [
            {
                "codigo_produto": "P1",
                "descricao_produto": "D",
                "quantidade": 2,
                "valor_unitario": 5,
                "gtin": "G",
            }
        ],
        "total_valor": 10,
        "forma_pagamento": "avista",
        "impostos": {"icms": 0, "ipi": 0},
    }


def test_fields_are_renamed_one_to_one(mercus_order_payload: dict[str, Any]) -> None:
    mercus_order_payload["produtos"].append(
        {
            "id_produto": "P2",
            "descricao": "Outro",
            "quantidade": 1,
            "preco_unitario": 7.9,
            "gtin": "7891234567895",
        }
    )
    source = mercus_order_payload

    hiper = build_hiper_payload(source)

    assert hiper["pedido_id"] == source["id_pedido"]
    assert hiper["data_pedido"] == source["data"]
    assert hiper["cliente"]["codigo"] == source["cliente"]["id"]
    for attr in ("nome", "endereco", "telefone", "email"):
        assert hiper["cliente"][attr] == source["cliente"][attr]
    assert len(hiper["itens"]) == len(source["produtos"])
    for item, produto in zip(hiper["itens"], source["produtos"], strict=True):
        assert item["codigo_produto"] == produto["id_produto"]
        assert item["descricao_produto"] == produto["descricao"]
        assert item["quantidade"] == produto["quantidade"]
        assert item["valor_unitario"] == produto["preco_unitario"]
        assert item["gtin"] == produto["gtin"]
    assert hiper["total_valor"] == source["total"]
    assert hiper["forma_pagamento"] == source["condicao_pagamento"]


def test_impostos_are_copied_when_present(mercus_order_payload: dict[str, Any]) -> None:
    mercus_order_payload["impostos"] = {"ICMS": 1.8, "IPI": 0.5}

    hiper = build_hiper_payload(mercus_order_payload)

    assert hiper["impostos"] == {"icms": 1.8, "ipi": 0.5}


@pytest.mark.parametrize("impostos", [None, {}, "x", 5])
def test_impostos_default_to_zero(
    mercus_order_payload: dict[str, Any],
    impostos: Any,
) -> None:
    mercus_order_payload["impostos"] = impostos

    hiper = build_hiper_payload(mercus_order_payload)

    assert hiper["impostos"] == {"icms": 0, "ipi": 0}


def test_partial_impostos_defaults_missing_tax(mercus_order_payload: dict[str, Any]) -> None:
    mercus_order_payload["impostos"] = {"ICMS": 3}

    hiper = build_hiper_payload(mercus_order_payload)

    assert hiper["impostos"] == {"icms": 3, "ipi": 0}


def test_missing_leaf_fields_become_none(mercus_order_payload: dict[str, Any]) -> None:
    del mercus_order_payload["cliente"]["email"]
    del mercus_order_payload["produtos"][0]["gtin"]
    del mercus_order_payload["condicao_pagamento"]

    hiper = build_hiper_payload(mercus_order_payload)

    assert hiper["cliente"]["email"] is None
    assert hiper["itens"][0]["gtin"] is None
    assert hiper["forma_pagamento"] is None


def test_empty_product_list_maps_to_empty_items(mercus_order_payload: dict[str, Any]) -> None:
    mercus_order_payload["produtos"] = []
    assert build_hiper_payload(mercus_order_payload)["itens"] == []


def test_map_is_deterministic(mercus_order_payload: dict[str, Any]) -> None:
    order = validate_mercus_order(mercus_order_payload)
    assert map_mercus_to_hiper(order) == map_mercus_to_hiper(order)


def test_builder_does_not_mutate_source(mercus_order_payload: dict[str, Any]) -> None:
    snapshot = {**mercus_order_payload, "cliente": dict(mercus_order_payload["cliente"])}
    build_hiper_payload(mercus_order_payload)
    assert mercus_order_payload["cliente"] == snapshot["cliente"]
    assert "pedido_id" not in mercus_order_payload


def test_builder_class_delegates(mercus_order_payload: dict[str, Any]) -> None:
    builder = HiperOrderPayloadBuilder()
    assert builder.build(mercus_order_payload) == build_hiper_payload(mercus_order_payload)


def test_builder_raises_typed_errors(mercus_order_payload: dict[str, Any]) -> None:
    builder = HiperOrderPayloadBuilder()

    with pytest.raises(MissingOrderIdError):
        builder.build({"cliente": {}, "produtos": []})

    del mercus_order_payload["cliente"]
    with pytest.raises(MercusOrderMappingError):
        builder.build(mercus_order_payload)
