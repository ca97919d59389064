"""Modelos do pedido no formato esperado pela API do Hiper."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HiperCliente(BaseModel):
    """Cliente do pedido (Hiper)."""

    codigo: Any = None
    nome: Any = None
    endereco: Any = None
    telefone: Any = None
    email: Any = None


class HiperItem(BaseModel):
    """Item do pedido (Hiper)."""

    codigo_produto: Any = None
    descricao_produto: Any = None
    quantidade: Any = None
    valor_unitario: Any = None
    gtin: Any = None


class HiperImpostos(BaseModel):
    """Impostos do pedido; zerados quando a origem não informa."""

    icms: Any = 0
    ipi: Any = 0


class HiperOrder(BaseModel):
    """Pedido traduzido, pronto para o POST na API do Hiper."""

    pedido_id: Any
    data_pedido: Any = None
    cliente: HiperCliente
    itens: list[HiperItem] = Field(default_factory=list)
    total_valor: Any = None
    forma_pagamento: Any = None
    impostos: HiperImpostos = Field(default_factory=HiperImpostos)
