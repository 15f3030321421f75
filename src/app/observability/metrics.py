"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Resultado de envio: counter por tipo de mensagem e status

Uso:
    from app.observability.metrics import record_latency, record_send_outcome

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("whatsapp_send", "post", latency_ms, correlation_id)
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
        component: Nome do componente (ex: "whatsapp_send")
        operation: Nome da operação (ex: "post")
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


def record_send_outcome(
    message_type: str,
    status: str,
    error_kind: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado de um envio (counter).

    Args:
        message_type: Tipo do envelope (ex: "template")
        status: "success" ou "error"
        error_kind: Classe da falha (schema_validation, api, transport)
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "counter",
        "message_type": message_type,
        "status": status,
        "correlation_id": correlation_id,
    }
    if error_kind:
        extra["error_kind"] = error_kind

    logger.info("metric_send_outcome", extra=extra)
