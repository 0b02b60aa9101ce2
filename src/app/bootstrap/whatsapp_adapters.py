"""Adapters concretos para WhatsApp (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.whatsapp import normalize_webhook
from api.payload_builders.whatsapp import build_full_payload
from app.protocols.normalizer import WebhookNormalizerProtocol
from app.protocols.outbound_sender import OutboundSenderProtocol
from app.protocols.payload_builder import PayloadBuilderProtocol

if TYPE_CHECKING:
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.models import (
        BuiltPayload,
        MediaUrlResult,
        NormalizedEvent,
        SendIntent,
        SendResult,
    )


class GraphApiNormalizer(WebhookNormalizerProtocol):
    """Normalizador de envelopes da Graph API."""

    def normalize(self, envelope: Any) -> NormalizedEvent:
        return normalize_webhook(envelope)


class GraphApiPayloadBuilder(PayloadBuilderProtocol):
    """Builder de payload para Graph API."""

    def build_full_payload(self, intent: SendIntent) -> BuiltPayload:
        return build_full_payload(intent)


class GraphApiOutboundSender(OutboundSenderProtocol):
    """Sender outbound sobre o cliente HTTP injetado."""

    def __init__(self, client: WhatsAppHttpClientProtocol) -> None:
        self._client = client

    async def send(self, payload: BuiltPayload) -> SendResult:
        return await self._client.send_message(payload.path, payload.body)

    async def get_media_url(self, media_id: str) -> MediaUrlResult:
        return await self._client.get_media_url(media_id)
