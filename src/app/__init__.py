"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (sem IO direto)
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta.
"""
