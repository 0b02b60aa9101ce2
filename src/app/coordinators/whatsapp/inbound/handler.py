"""Processamento inbound: aplica correlation_id e executa o use case.

Sem logs com PII. Um envelope gera no máximo um evento.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.observability import reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from app.protocols.models import NormalizedEvent
    from app.use_cases.whatsapp.handle_inbound_event import HandleInboundEventUseCase

logger = logging.getLogger(__name__)


async def process_inbound_payload(
    payload: Any,
    correlation_id: str,
    use_case: HandleInboundEventUseCase,
) -> NormalizedEvent:
    """Processa envelope de webhook dentro do contexto de correlação.

    Args:
        payload: Corpo JSON do webhook (não confiável)
        correlation_id: ID de correlação para rastreamento
        use_case: Use case inbound injetado

    Returns:
        Evento normalizado (ou None)
    """
    token = set_correlation_id(correlation_id)
    try:
        event = await use_case.execute(payload)
        logger.info(
            "inbound_processed",
            extra={"event_kind": type(event).__name__ if event is not None else None},
        )
        return event
    finally:
        reset_correlation_id(token)
