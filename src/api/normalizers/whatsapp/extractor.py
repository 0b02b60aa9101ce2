"""Extrator estrutural do envelope de webhook WhatsApp.

Navega object -> entry[0] -> changes[0] -> value sem validação de
negócio. Qualquer nível ausente ou com tipo inesperado resulta em None.
"""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import WEBHOOK_OBJECT


def _first(container: Any, key: str) -> Any:
    """Primeiro elemento de container[key], ou None se não houver lista não vazia."""
    if not isinstance(container, dict):
        return None
    items = container.get(key)
    if not isinstance(items, list) or not items:
        return None
    return items[0]


def extract_change_value(envelope: Any) -> dict[str, Any] | None:
    """Retorna entry[0].changes[0].value de um envelope whatsapp_business_account."""
    if not isinstance(envelope, dict) or envelope.get("object") != WEBHOOK_OBJECT:
        return None

    change = _first(_first(envelope, "entry"), "changes")
    if not isinstance(change, dict):
        return None

    value = change.get("value")
    return value if isinstance(value, dict) else None


def first_message(value: dict[str, Any]) -> Any:
    """messages[0] (qualquer tipo), ou None se messages vazio/ausente."""
    return _first(value, "messages")


def first_status(value: dict[str, Any]) -> Any:
    return _first(value, "statuses")


def first_contact(value: dict[str, Any]) -> dict[str, Any] | None:
    contact = _first(value, "contacts")
    return contact if isinstance(contact, dict) else None
