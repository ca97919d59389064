"""Tradução do pedido Mercus para o pedido Hiper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.hiper.models import HiperCliente, HiperImpostos, HiperItem, HiperOrder
from api.validators.mercus import validate_mercus_order

if TYPE_CHECKING:
    from api.connectors.mercus.models import MercusOrder, MercusProduto


def _map_item(produto: MercusProduto) -> HiperItem:
    return HiperItem(
        codigo_produto=produto.id_produto,
        descricao_produto=produto.descricao,
        quantidade=produto.quantidade,
        valor_unitario=produto.preco_unitario,
        gtin=produto.gtin,
    )


def map_mercus_to_hiper(order: MercusOrder) -> HiperOrder:
    """Renomeia os campos do pedido Mercus para o formato Hiper.

    Função pura: sem IO e sem falhas sobre um MercusOrder já validado.
    Sem ``impostos`` na origem, ICMS e IPI saem zerados.
    """
    cliente = order.cliente
    impostos = (
        HiperImpostos(icms=order.impostos.ICMS, ipi=order.impostos.IPI)
        if order.impostos is not None
        else HiperImpostos()
    )
    return HiperOrder(
        pedido_id=order.id_pedido,
        data_pedido=order.data,
        cliente=HiperCliente(
            codigo=cliente.id,
            nome=cliente.nome,
            endereco=cliente.endereco,
            telefone=cliente.telefone,
            email=cliente.email,
        ),
        itens=[_map_item(produto) for produto in order.produtos],
        total_valor=order.total,
        forma_pagamento=order.condicao_pagamento,
        impostos=impostos,
    )


def build_hiper_payload(payload: Any) -> dict[str, Any]:
    """Valida o corpo do webhook Mercus e retorna o JSON do pedido Hiper.

    Raises:
        MissingOrderIdError: Se id_pedido ausente ou vazio
        MercusOrderMappingError: Se a estrutura do pedido for inválida
    """
    return map_mercus_to_hiper(validate_mercus_order(payload)).model_dump()


class HiperOrderPayloadBuilder:
    """Builder do pedido Hiper a partir do webhook Mercus."""

    def build(self, payload: Any) -> dict[str, Any]:
        return build_hiper_payload(payload)
