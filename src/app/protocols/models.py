"""Modelos canônicos de envio (intents/resultados) e de eventos inbound.

Contratos compartilhados entre app/ e api/. Nenhum modelo é persistido:
são construídos por chamada e descartados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, TypedDict

from app.constants.whatsapp import MediaType

# ──────────────────────────────────────────────────────────────────────────────
# Intents de envio
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TextIntent:
    """Mensagem de texto livre."""

    to: str
    body: str
    preview_url: bool = True


@dataclass(frozen=True, slots=True)
class TemplateIntent:
    """Mensagem de template aprovado."""

    to: str
    name: str
    language_code: str = "en_US"
    components: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MediaIntent:
    """Mídia enviada por link público."""

    to: str
    media_type: MediaType
    url: str
    caption: str = ""
    filename: str = ""


@dataclass(frozen=True, slots=True)
class ReplyButton:
    """Botão de resposta rápida; id ausente vira btn_<índice>."""

    title: str
    id: str | None = None


@dataclass(frozen=True, slots=True)
class ButtonsIntent:
    """Mensagem interativa com botões de resposta."""

    to: str
    body: str
    buttons: list[ReplyButton] = field(default_factory=list)
    header: str = ""
    footer: str = ""


@dataclass(frozen=True, slots=True)
class ListIntent:
    """Mensagem interativa de lista com seções."""

    to: str
    body: str
    button_label: str
    sections: list[dict[str, Any]] = field(default_factory=list)
    header: str = ""
    footer: str = ""


@dataclass(frozen=True, slots=True)
class MarkReadIntent:
    """Confirmação de leitura de mensagem recebida."""

    message_id: str


SendIntent = TextIntent | TemplateIntent | MediaIntent | ButtonsIntent | ListIntent | MarkReadIntent


class BuiltPayload(NamedTuple):
    """Path relativo ao endpoint do número e corpo JSON pronto para envio."""

    path: str
    body: dict[str, Any]


# ──────────────────────────────────────────────────────────────────────────────
# Resultados
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SendResult:
    """Resultado normalizado de um envio.

    Attributes:
        success: True se a chamada HTTP foi bem-sucedida (2xx)
        message_id: ID da mensagem (messages[0].id), quando presente
        error: Objeto de erro da Meta, ou {"message", "type": "unknown_error"}
        data: Corpo bruto da resposta em caso de sucesso
    """

    success: bool
    message_id: str | None = None
    error: dict[str, Any] | None = None
    data: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class MediaUrlResult:
    """Resultado da consulta de URL de mídia."""

    success: bool
    url: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    error: Any = None


# ──────────────────────────────────────────────────────────────────────────────
# Conteúdo normalizado por tipo (chaves ausentes = campo ausente no upstream)
# ──────────────────────────────────────────────────────────────────────────────


class TextContent(TypedDict, total=False):
    text: str


class MediaContent(TypedDict, total=False):
    id: str
    mime_type: str
    caption: str
    sha256: str
    filename: str


class LocationContent(TypedDict, total=False):
    latitude: float
    longitude: float
    name: str
    address: str


class ButtonReplyContent(TypedDict, total=False):
    button_id: str
    button_title: str


class ListReplyContent(TypedDict, total=False):
    list_id: str
    list_title: str
    list_description: str


class InteractiveContent(TypedDict, total=False):
    interactive: dict[str, Any]


class QuickReplyButtonContent(TypedDict, total=False):
    button_text: str
    button_payload: str


class RawContent(TypedDict):
    raw: Any


MessageContent = (
    TextContent
    | MediaContent
    | LocationContent
    | ButtonReplyContent
    | ListReplyContent
    | InteractiveContent
    | QuickReplyButtonContent
    | RawContent
)


# ──────────────────────────────────────────────────────────────────────────────
# Eventos normalizados
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class InboundMessageEvent:
    """Mensagem recebida, já normalizada."""

    from_number: str | None
    message_id: str | None
    timestamp: str | None
    message_type: str | None
    content: MessageContent
    contact: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class MessageStatusEvent:
    """Atualização de status de uma mensagem enviada."""

    message_id: str | None
    status: str | None
    timestamp: str | None
    recipient_id: str | None
    errors: list[dict[str, Any]] | None = None


NormalizedEvent = InboundMessageEvent | MessageStatusEvent | None
