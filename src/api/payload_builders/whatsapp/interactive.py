"""Builders para mensagens interativas (botões de resposta e lista)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import (
    build_base_payload,
    build_optional_header_footer,
)
from app.constants.whatsapp import InteractiveType, MessageType

if TYPE_CHECKING:
    from app.protocols.models import ButtonsIntent, ListIntent, ReplyButton


def _build_button_action(buttons: list[ReplyButton]) -> dict[str, Any]:
    """Action de botões; id ausente recebe btn_<índice> (base 0)."""
    return {
        "buttons": [
            {
                "type": "reply",
                "reply": {
                    "id": button.id or f"btn_{index}",
                    "title": button.title,
                },
            }
            for index, button in enumerate(buttons)
        ]
    }


def _build_list_action(button_label: str, sections: list[dict[str, Any]]) -> dict[str, Any]:
    return {"button": button_label, "sections": list(sections)}


class ButtonsPayloadBuilder:
    """Builder para interativo do tipo button."""

    def build(self, intent: ButtonsIntent) -> dict[str, Any]:
        interactive: dict[str, Any] = {
            "type": InteractiveType.BUTTON,
            "body": {"text": intent.body},
            "action": _build_button_action(intent.buttons),
            **build_optional_header_footer(intent.header, intent.footer),
        }
        return {
            **build_base_payload(intent.to, MessageType.INTERACTIVE),
            "interactive": interactive,
        }


class ListPayloadBuilder:
    """Builder para interativo do tipo list."""

    def build(self, intent: ListIntent) -> dict[str, Any]:
        interactive: dict[str, Any] = {
            "type": InteractiveType.LIST,
            "body": {"text": intent.body},
            "action": _build_list_action(intent.button_label, intent.sections),
            **build_optional_header_footer(intent.header, intent.footer),
        }
        return {
            **build_base_payload(intent.to, MessageType.INTERACTIVE),
            "interactive": interactive,
        }
