"""Factory para obter o builder correto por intent e montar o payload final."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.interactive import (
    ButtonsPayloadBuilder,
    ListPayloadBuilder,
)
from api.payload_builders.whatsapp.media import (
    AudioPayloadBuilder,
    DocumentPayloadBuilder,
    ImagePayloadBuilder,
    VideoPayloadBuilder,
)
from api.payload_builders.whatsapp.status import MarkReadPayloadBuilder
from api.payload_builders.whatsapp.template import TemplatePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder
from app.constants.whatsapp import MESSAGES_PATH, MediaType
from app.protocols.models import (
    BuiltPayload,
    ButtonsIntent,
    ListIntent,
    MarkReadIntent,
    MediaIntent,
    TemplateIntent,
    TextIntent,
)

if TYPE_CHECKING:
    from api.payload_builders.whatsapp.base import PayloadBuilder
    from app.protocols.models import SendIntent

# Mapeamento de tipo de intent para builder
_BUILDERS: dict[type, PayloadBuilder] = {
    TextIntent: TextPayloadBuilder(),
    TemplateIntent: TemplatePayloadBuilder(),
    ButtonsIntent: ButtonsPayloadBuilder(),
    ListIntent: ListPayloadBuilder(),
    MarkReadIntent: MarkReadPayloadBuilder(),
}

# Mídia: um builder por tipo
_MEDIA_BUILDERS: dict[MediaType, PayloadBuilder] = {
    MediaType.IMAGE: ImagePayloadBuilder(),
    MediaType.VIDEO: VideoPayloadBuilder(),
    MediaType.DOCUMENT: DocumentPayloadBuilder(),
    MediaType.AUDIO: AudioPayloadBuilder(),
}


def get_payload_builder(intent: SendIntent) -> PayloadBuilder | None:
    """Retorna o builder para o intent, ou None se não suportado."""
    if isinstance(intent, MediaIntent):
        try:
            return _MEDIA_BUILDERS.get(MediaType(intent.media_type))
        except ValueError:
            return None
    return _BUILDERS.get(type(intent))


def build_full_payload(intent: SendIntent) -> BuiltPayload:
    """Constrói path e payload completos para a API Meta.

    Todos os envios (inclusive mark-as-read) usam o path /messages.

    Args:
        intent: Intent de envio

    Returns:
        BuiltPayload(path, body)

    Raises:
        ValueError: Se o tipo de intent (ou de mídia) não for suportado
    """
    builder = get_payload_builder(intent)
    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {type(intent).__name__}")
    return BuiltPayload(path=MESSAGES_PATH, body=builder.build(intent))
