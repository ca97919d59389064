"""Erros de validação do pedido Mercus."""


class MercusOrderMappingError(ValueError):
    """Pedido com estrutura que não permite a tradução para o Hiper."""


class MissingOrderIdError(MercusOrderMappingError):
    """Campo ``id_pedido`` ausente ou vazio."""
