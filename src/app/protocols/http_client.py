"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import MediaUrlResult, SendResult


class WhatsAppHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP da Cloud API."""

    async def send_message(self, path: str, payload: dict[str, Any]) -> SendResult: ...

    async def get_media_url(self, media_id: str) -> MediaUrlResult: ...
