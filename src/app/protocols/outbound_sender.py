"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import BuiltPayload, MediaUrlResult, SendResult


class OutboundSenderProtocol(Protocol):
    """Contrato mínimo para enviar payload outbound e consultar mídia."""

    async def send(self, payload: BuiltPayload) -> SendResult: ...

    async def get_media_url(self, media_id: str) -> MediaUrlResult: ...
