"""Modelos do pedido recebido no webhook do Mercus.

Valores folha são repassados sem coerção de tipo; apenas a estrutura
(cliente objeto, produtos lista de objetos) é exigida. Um ``impostos`` que
não seja objeto é tratado como ausente.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class MercusCliente(BaseModel):
    """Cliente do pedido (Mercus)."""

    model_config = ConfigDict(extra="ignore")

    id: Any = None
    nome: Any = None
    endereco: Any = None
    telefone: Any = None
    email: Any = None


class MercusProduto(BaseModel):
    """Produto do pedido (Mercus)."""

    model_config = ConfigDict(extra="ignore")

    id_produto: Any = None
    descricao: Any = None
    quantidade: Any = None
    preco_unitario: Any = None
    gtin: Any = None


class MercusImpostos(BaseModel):
    """Impostos opcionais do pedido (Mercus)."""

    model_config = ConfigDict(extra="ignore")

    ICMS: Any = 0
    IPI: Any = 0


class MercusOrder(BaseModel):
    """Pedido completo enviado pelo Mercus."""

    model_config = ConfigDict(extra="ignore")

    id_pedido: Any
    data: Any = None
    cliente: MercusCliente
    produtos: list[MercusProduto]
    total: Any = None
    condicao_pagamento: Any = None
    impostos: MercusImpostos | None = None

    @field_validator("impostos", mode="before")
    @classmethod
    def _ignore_non_object_impostos(cls, value: Any) -> Any:
        if isinstance(value, (dict, MercusImpostos)):
            return value
        return None
