"""Protocolos e contratos do core da aplicação."""

from .http_client import WhatsAppHttpClientProtocol
from .models import (
    BuiltPayload,
    ButtonsIntent,
    InboundMessageEvent,
    ListIntent,
    MarkReadIntent,
    MediaIntent,
    MediaUrlResult,
    MessageStatusEvent,
    NormalizedEvent,
    ReplyButton,
    SendIntent,
    SendResult,
    TemplateIntent,
    TextIntent,
)
from .normalizer import WebhookNormalizerProtocol
from .outbound_sender import OutboundSenderProtocol
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "BuiltPayload",
    "ButtonsIntent",
    "InboundMessageEvent",
    "ListIntent",
    "MarkReadIntent",
    "MediaIntent",
    "MediaUrlResult",
    "MessageStatusEvent",
    "NormalizedEvent",
    "OutboundSenderProtocol",
    "PayloadBuilderProtocol",
    "ReplyButton",
    "SendIntent",
    "SendResult",
    "TemplateIntent",
    "TextIntent",
    "WebhookNormalizerProtocol",
    "WhatsAppHttpClientProtocol",
]
