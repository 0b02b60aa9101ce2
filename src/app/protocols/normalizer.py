"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import NormalizedEvent


class WebhookNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização de envelope de webhook.

    Função total: nunca levanta exceção, retorna None sem dados acionáveis.
    """

    def normalize(self, envelope: Any) -> NormalizedEvent: ...
