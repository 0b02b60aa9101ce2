"""Enums e constantes de domínio para a Cloud API do WhatsApp."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT = "whatsapp"

# Discriminador do envelope de webhook (campo "object")
WEBHOOK_OBJECT = "whatsapp_business_account"

# Path relativo ao endpoint do número para todos os envios
MESSAGES_PATH = "/messages"


class MessageType(StrEnum):
    """Tipos de mensagem usados em envios e recebimentos."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    LOCATION = "location"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"
    BUTTON = "button"


class MediaType(StrEnum):
    """Tipos de mídia aceitos para envio por link."""

    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    AUDIO = "audio"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas enviadas."""

    BUTTON = "button"
    LIST = "list"


class InteractiveReplyType(StrEnum):
    """Tipos de resposta interativa recebidos no webhook."""

    BUTTON_REPLY = "button_reply"
    LIST_REPLY = "list_reply"


class MessageStatus(StrEnum):
    """Status de entrega reportados pela Meta."""

    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
