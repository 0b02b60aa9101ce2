"""Despacho do processamento inbound (inline ou em task de background).

Falhas de processamento nunca chegam à Meta: são logadas aqui e o webhook
já respondeu (ou responde) 200.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from api.routes.whatsapp.webhook_runtime_tasks import (
    drain_processing_tasks,
    schedule_processing_task,
)
from app.coordinators.whatsapp.inbound.handler import process_inbound_payload

if TYPE_CHECKING:
    from app.use_cases.whatsapp.handle_inbound_event import HandleInboundEventUseCase

logger = logging.getLogger(__name__)


class ProcessingMode(StrEnum):
    ASYNC = "async"
    INLINE = "inline"


def resolve_processing_mode(settings: Any) -> ProcessingMode:
    """Modo configurado; qualquer valor desconhecido cai em async."""
    raw = str(getattr(settings, "webhook_processing_mode", "") or "").lower()
    return ProcessingMode.INLINE if raw == ProcessingMode.INLINE else ProcessingMode.ASYNC


async def process_inbound_payload_safe(
    *,
    payload: Any,
    correlation_id: str,
    use_case: HandleInboundEventUseCase,
) -> None:
    try:
        await process_inbound_payload(
            payload=payload,
            correlation_id=correlation_id,
            use_case=use_case,
        )
    except Exception:
        logger.exception("webhook_processing_failed", extra={"correlation_id": correlation_id})


async def dispatch_inbound_processing(
    *,
    payload: Any,
    correlation_id: str,
    settings: Any,
    use_case: HandleInboundEventUseCase | None,
) -> None:
    """Processa o envelope agora (inline) ou agenda uma task (async).

    Sem use case (cliente não configurado no startup) o envelope é
    descartado com warning.
    """
    if use_case is None:
        logger.warning(
            "webhook_use_case_unavailable",
            extra={"correlation_id": correlation_id, "reason": "whatsapp_services_missing"},
        )
        return

    job = process_inbound_payload_safe(
        payload=payload,
        correlation_id=correlation_id,
        use_case=use_case,
    )
    mode = resolve_processing_mode(settings)
    if mode is ProcessingMode.ASYNC:
        schedule_processing_task(correlation_id=correlation_id, coroutine=job)
        return

    await job
    logger.info("webhook_processing_completed", extra={"mode": mode.value})


async def drain_background_tasks(timeout_seconds: float = 30.0) -> int:
    """Shutdown: espera as tasks pendentes; retorna quantas foram canceladas."""
    return await drain_processing_tasks(timeout_seconds=timeout_seconds)
