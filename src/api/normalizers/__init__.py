"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- whatsapp/: normalizer de webhooks da WhatsApp Cloud API
"""

from .whatsapp import normalize_webhook

__all__ = ["normalize_webhook"]
