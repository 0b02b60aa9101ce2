"""Use case para envio outbound WhatsApp.

Recebe um intent, constrói o payload e delega o envio ao sender.
Nunca levanta: falhas de build viram SendResult com
`{"type": "payload_build_error"}`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import (
    ButtonsIntent,
    ListIntent,
    MarkReadIntent,
    MediaIntent,
    ReplyButton,
    SendResult,
    TemplateIntent,
    TextIntent,
)

if TYPE_CHECKING:
    from app.constants.whatsapp import MediaType
    from app.protocols.models import MediaUrlResult, SendIntent
    from app.protocols.outbound_sender import OutboundSenderProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol

logger = logging.getLogger(__name__)

PAYLOAD_BUILD_ERROR = "payload_build_error"


class SendOutboundMessageUseCase:
    """Orquestra build e envio outbound."""

    def __init__(
        self,
        builder: PayloadBuilderProtocol,
        sender: OutboundSenderProtocol,
    ) -> None:
        self._builder = builder
        self._sender = sender

    async def execute(self, intent: SendIntent) -> SendResult:
        """Executa envio outbound com tratamento de erro de build."""
        try:
            payload = self._builder.build_full_payload(intent)
        except Exception as exc:
            logger.warning(
                "whatsapp_payload_build_failed",
                extra={"intent": type(intent).__name__, "error_type": type(exc).__name__},
            )
            return SendResult(
                success=False,
                error={"message": str(exc), "type": PAYLOAD_BUILD_ERROR},
            )

        return await self._sender.send(payload)

    # Atalhos por tipo de mensagem

    async def send_text(self, to: str, body: str, preview_url: bool = True) -> SendResult:
        return await self.execute(TextIntent(to=to, body=body, preview_url=preview_url))

    async def send_template(
        self,
        to: str,
        name: str,
        language_code: str = "en_US",
        components: list[dict[str, Any]] | None = None,
    ) -> SendResult:
        return await self.execute(
            TemplateIntent(
                to=to,
                name=name,
                language_code=language_code,
                components=list(components or []),
            )
        )

    async def send_media(
        self,
        to: str,
        media_type: MediaType,
        url: str,
        caption: str = "",
        filename: str = "",
    ) -> SendResult:
        return await self.execute(
            MediaIntent(
                to=to,
                media_type=media_type,
                url=url,
                caption=caption,
                filename=filename,
            )
        )

    async def send_buttons(
        self,
        to: str,
        body: str,
        buttons: list[ReplyButton],
        header: str = "",
        footer: str = "",
    ) -> SendResult:
        return await self.execute(
            ButtonsIntent(to=to, body=body, buttons=list(buttons), header=header, footer=footer)
        )

    async def send_list(
        self,
        to: str,
        body: str,
        button_label: str,
        sections: list[dict[str, Any]],
        header: str = "",
        footer: str = "",
    ) -> SendResult:
        return await self.execute(
            ListIntent(
                to=to,
                body=body,
                button_label=button_label,
                sections=list(sections),
                header=header,
                footer=footer,
            )
        )

    async def mark_as_read(self, message_id: str) -> SendResult:
        return await self.execute(MarkReadIntent(message_id=message_id))

    async def get_media_url(self, media_id: str) -> MediaUrlResult:
        """Consulta URL temporária de mídia recebida."""
        return await self._sender.get_media_url(media_id)
