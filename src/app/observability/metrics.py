"""Métricas registradas como logs estruturados.

Agregáveis depois no destino dos logs (Cloud Logging, CloudWatch Insights).

Métricas:
- metric_latency: tempo de uma operação por componente
- metric_forward_outcome: contador de encaminhamentos por destino e resultado
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "hiper_forwarder")
        operation: Nome da operação (ex: "forward")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_forward_outcome(
    target: str,
    outcome: str,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado de um encaminhamento (success|failed)."""
    logger.info(
        "metric_forward_outcome",
        extra={
            "metric_type": "counter",
            "target": target,
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
