"""Contrato e payload base compartilhados pelos builders WhatsApp."""

from __future__ import annotations

from typing import Any, Protocol

from app.constants.whatsapp import MESSAGING_PRODUCT


class PayloadBuilder(Protocol):
    """Builder de um tipo de intent: retorna o payload completo."""

    def build(self, intent: Any) -> dict[str, Any]: ...


def build_base_payload(to: str, message_type: str) -> dict[str, Any]:
    """Campos comuns a toda mensagem enviada a um destinatário individual."""
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": "individual",
        "to": to,
        "type": message_type,
    }


def build_optional_header_footer(header: str, footer: str) -> dict[str, Any]:
    """Header (texto) e footer, incluídos apenas se não vazios."""
    parts: dict[str, Any] = {}
    if header:
        parts["header"] = {"type": "text", "text": header}
    if footer:
        parts["footer"] = {"text": footer}
    return parts
