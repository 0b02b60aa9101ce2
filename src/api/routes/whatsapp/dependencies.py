"""Acesso às dependências do canal guardadas em app.state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Request

from api.validators.whatsapp import ValidationError

if TYPE_CHECKING:
    from app.bootstrap.whatsapp_factory import WhatsAppServices

SERVICES_UNAVAILABLE_MESSAGE = "WhatsApp client not configured"


def get_whatsapp_services(request: Request) -> WhatsAppServices | None:
    """Serviços criados no lifespan; None se o startup não os criou."""
    state = getattr(request.app, "state", None)
    return getattr(state, "whatsapp_services", None)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Lê o corpo como objeto JSON.

    Raises:
        ValidationError: "Invalid JSON" se o corpo não for um objeto JSON
    """
    try:
        body = await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid JSON") from exc
    if not isinstance(body, dict):
        raise ValidationError("Invalid JSON")
    return body
