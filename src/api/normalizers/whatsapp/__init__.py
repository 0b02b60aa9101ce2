"""Normalizer WhatsApp: envelope de webhook para evento interno.

Tipos com conteúdo extraído: text, image, video, document, audio,
location, interactive (button_reply, list_reply) e button. Demais tipos
preservam o elemento bruto em `raw`.
"""

from .normalizer import normalize_webhook

__all__ = ["normalize_webhook"]
