"""Helpers de extração de conteúdo por tipo de mensagem WhatsApp.

Cada função recebe o elemento bruto de `messages[]` e devolve o
conteúdo normalizado. Campos ausentes no upstream ficam ausentes no
resultado (nunca None como placeholder).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.whatsapp import InteractiveReplyType, MessageType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols.models import (
        ButtonReplyContent,
        InteractiveContent,
        ListReplyContent,
        LocationContent,
        MediaContent,
        MessageContent,
        QuickReplyButtonContent,
        TextContent,
    )

# Campos copiados de cada bloco de mídia
_MEDIA_FIELDS: dict[str, tuple[str, ...]] = {
    MessageType.IMAGE: ("id", "mime_type", "caption", "sha256"),
    MessageType.VIDEO: ("id", "mime_type", "caption", "sha256"),
    MessageType.DOCUMENT: ("id", "filename", "mime_type", "caption", "sha256"),
    MessageType.AUDIO: ("id", "mime_type", "sha256"),
}

_LOCATION_FIELDS = ("latitude", "longitude", "name", "address")


def _block(msg: dict[str, Any], key: str) -> dict[str, Any]:
    """Retorna msg[key] se for dict; caso contrário, dict vazio."""
    block = msg.get(key)
    return block if isinstance(block, dict) else {}


def _pick(
    block: dict[str, Any],
    fields: Iterable[tuple[str, str]],
) -> dict[str, Any]:
    """Copia (origem -> destino) apenas os campos presentes no bloco."""
    return {target: block[source] for source, target in fields if source in block}


def extract_text_content(msg: dict[str, Any]) -> TextContent:
    return _pick(_block(msg, "text"), [("body", "text")])  # type: ignore[return-value]


def extract_media_content(msg: dict[str, Any], media_type: str) -> MediaContent:
    """Extrai campos de mídia (image, video, document, audio)."""
    fields = _MEDIA_FIELDS[media_type]
    return _pick(_block(msg, media_type), [(f, f) for f in fields])  # type: ignore[return-value]


def extract_location_content(msg: dict[str, Any]) -> LocationContent:
    return _pick(_block(msg, "location"), [(f, f) for f in _LOCATION_FIELDS])  # type: ignore[return-value]


def extract_interactive_content(
    msg: dict[str, Any],
) -> ButtonReplyContent | ListReplyContent | InteractiveContent:
    """Extrai resposta interativa.

    - button_reply: button_id, button_title
    - list_reply: list_id, list_title, list_description
    - outros: bloco interactive bruto
    """
    interactive_block = _block(msg, "interactive")
    interactive_type = interactive_block.get("type")

    if interactive_type == InteractiveReplyType.BUTTON_REPLY:
        reply = _block(interactive_block, "button_reply")
        return _pick(reply, [("id", "button_id"), ("title", "button_title")])  # type: ignore[return-value]

    if interactive_type == InteractiveReplyType.LIST_REPLY:
        reply = _block(interactive_block, "list_reply")
        return _pick(  # type: ignore[return-value]
            reply,
            [("id", "list_id"), ("title", "list_title"), ("description", "list_description")],
        )

    if "interactive" not in msg:
        return {}
    return {"interactive": msg["interactive"]}


def extract_button_content(msg: dict[str, Any]) -> QuickReplyButtonContent:
    """Extrai clique em botão de template (quick reply)."""
    return _pick(  # type: ignore[return-value]
        _block(msg, "button"),
        [("text", "button_text"), ("payload", "button_payload")],
    )


def extract_content(msg: dict[str, Any], message_type: Any) -> MessageContent:
    """Despacha a extração pelo tipo; tipo desconhecido preserva o elemento."""
    if not isinstance(message_type, str):
        return {"raw": msg}
    if message_type == MessageType.TEXT:
        return extract_text_content(msg)
    if message_type in _MEDIA_FIELDS:
        return extract_media_content(msg, message_type)
    if message_type == MessageType.LOCATION:
        return extract_location_content(msg)
    if message_type == MessageType.INTERACTIVE:
        return extract_interactive_content(msg)
    if message_type == MessageType.BUTTON:
        return extract_button_content(msg)
    return {"raw": msg}
