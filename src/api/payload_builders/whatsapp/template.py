"""Builder para mensagens de template."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.whatsapp import MESSAGING_PRODUCT, MessageType

if TYPE_CHECKING:
    from app.protocols.models import TemplateIntent


class TemplatePayloadBuilder:
    """Builder para mensagens de template."""

    def build(self, intent: TemplateIntent) -> dict[str, Any]:
        """Constrói payload para mensagem de template.

        Template não leva recipient_type. `components` é omitido
        quando vazio (a Meta rejeita lista vazia em alguns templates).

        Args:
            intent: Intent com nome, idioma e componentes

        Returns:
            Payload template conforme API Meta
        """
        template_obj: dict[str, Any] = {
            "name": intent.name,
            "language": {"code": intent.language_code},
        }
        if intent.components:
            template_obj["components"] = list(intent.components)

        return {
            "messaging_product": MESSAGING_PRODUCT,
            "to": intent.to,
            "type": MessageType.TEMPLATE,
            "template": template_obj,
        }
