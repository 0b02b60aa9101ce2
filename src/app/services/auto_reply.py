"""Auto-responder para mensagens recebidas.

Para cada mensagem: marca como lida e responde conforme o tipo.
Falhas de envio são logadas; nada é relançado para o webhook.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.whatsapp import MessageType
from app.constants.whatsapp_fixed_replies import (
    BUTTON_CLICK_TEMPLATE,
    LOCATION_TEMPLATE,
    MEDIA_ACKNOWLEDGEMENTS,
    MENU_BODY,
    MENU_FOOTER,
    MENU_HEADER,
    MENU_OPTIONS,
)
from app.protocols.models import ReplyButton
from app.services.whatsapp_fixed_replies import match_fixed_reply
from config.logging import mask_phone

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from app.protocols.models import InboundMessageEvent, SendResult
    from app.use_cases.whatsapp.send_outbound_message import SendOutboundMessageUseCase

logger = logging.getLogger(__name__)


class AutoReplyService:
    """Responde mensagens recebidas via use case outbound."""

    def __init__(
        self,
        outbound: SendOutboundMessageUseCase,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._outbound = outbound
        self._clock = clock

    async def handle_message(self, event: InboundMessageEvent) -> None:
        to = event.from_number
        if not to:
            logger.warning("inbound_message_without_sender", extra={"message_id": event.message_id})
            return

        if event.message_id:
            self._log_failure(await self._outbound.mark_as_read(event.message_id), "mark_as_read")

        message_type = event.message_type
        content = event.content

        if message_type == MessageType.TEXT:
            await self._reply_text_command(to, content.get("text"))
        elif message_type in MEDIA_ACKNOWLEDGEMENTS:
            await self._send_text(to, MEDIA_ACKNOWLEDGEMENTS[message_type])
        elif message_type == MessageType.LOCATION:
            await self._send_text(
                to,
                LOCATION_TEMPLATE.format(
                    latitude=content.get("latitude"),
                    longitude=content.get("longitude"),
                ),
            )
        elif message_type == MessageType.INTERACTIVE and content.get("button_id"):
            await self._send_text(
                to, BUTTON_CLICK_TEMPLATE.format(title=content.get("button_title", ""))
            )
        else:
            logger.info("inbound_message_not_handled", extra={"message_type": message_type})

    async def _reply_text_command(self, to: str, text: str | None) -> None:
        if not isinstance(text, str):
            logger.info("text_message_without_body", extra={"to": mask_phone(to)})
            return

        reply = match_fixed_reply(text, clock=self._clock)
        logger.info("auto_reply_matched", extra={"reply_key": reply.key})

        if reply.kind == "menu":
            result = await self._outbound.send_buttons(
                to,
                MENU_BODY,
                [ReplyButton(id=option_id, title=title) for option_id, title in MENU_OPTIONS],
                header=MENU_HEADER,
                footer=MENU_FOOTER,
            )
            self._log_failure(result, "send_menu")
            return

        await self._send_text(to, reply.response_text)

    async def _send_text(self, to: str, body: str) -> None:
        self._log_failure(await self._outbound.send_text(to, body), "send_reply")

    @staticmethod
    def _log_failure(result: SendResult, operation: str) -> None:
        if result.success:
            return
        error = result.error or {}
        logger.warning(
            "auto_reply_send_failed",
            extra={"operation": operation, "error_type": error.get("type")},
        )
