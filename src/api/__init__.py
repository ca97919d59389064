"""API — camada de borda da integração.

Responsabilidades:
- Receber o webhook de pedidos do Mercus
- Validar o pedido recebido
- Traduzir para o formato do Hiper
- Chamar a API de pedidos do Hiper

Subpastas:
- connectors/: adapters HTTP e modelos por plataforma (mercus, hiper)
- payload_builders/: construção do pedido Hiper
- validators/: validação do pedido Mercus
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração de use cases.
"""
