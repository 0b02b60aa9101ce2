"""Normalizer de webhooks WhatsApp.

Converte o envelope bruto em um único evento normalizado:
- mensagem (precedência sobre status quando ambos existem)
- status de entrega
- None para qualquer envelope irrelevante ou malformado

Função total: nunca levanta; falhas internas são logadas e viram None.
"""

from __future__ import annotations

import logging
from typing import Any

from app.protocols.models import (
    InboundMessageEvent,
    MessageStatusEvent,
    NormalizedEvent,
)

from ._extraction_helpers import extract_content
from .extractor import extract_change_value, first_contact, first_message, first_status

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _build_message_event(
    message: dict[str, Any],
    value: dict[str, Any],
) -> InboundMessageEvent:
    message_type = message.get("type")
    metadata = value.get("metadata")
    return InboundMessageEvent(
        from_number=_optional_str(message.get("from")),
        message_id=_optional_str(message.get("id")),
        timestamp=_optional_str(message.get("timestamp")),
        message_type=_optional_str(message_type),
        content=extract_content(message, message_type),
        contact=first_contact(value),
        metadata=metadata if isinstance(metadata, dict) else None,
    )


def _build_status_event(status: dict[str, Any]) -> MessageStatusEvent:
    errors = status.get("errors")
    return MessageStatusEvent(
        message_id=_optional_str(status.get("id")),
        status=_optional_str(status.get("status")),
        timestamp=_optional_str(status.get("timestamp")),
        recipient_id=_optional_str(status.get("recipient_id")),
        errors=errors if isinstance(errors, list) else None,
    )


def _normalize(envelope: Any) -> NormalizedEvent:
    value = extract_change_value(envelope)
    if value is None:
        return None

    message = first_message(value)
    if message is not None:
        # messages[0] presente mas não objeto: envelope malformado
        if not isinstance(message, dict):
            return None
        return _build_message_event(message, value)

    status = first_status(value)
    if isinstance(status, dict):
        return _build_status_event(status)

    return None


def normalize_webhook(envelope: Any) -> NormalizedEvent:
    """Normaliza envelope de webhook em evento interno.

    Args:
        envelope: Corpo JSON já parseado (não confiável)

    Returns:
        InboundMessageEvent, MessageStatusEvent ou None
    """
    try:
        return _normalize(envelope)
    except Exception:
        logger.exception("webhook_normalization_failed")
        return None
