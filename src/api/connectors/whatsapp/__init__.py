"""Conector WhatsApp - adapter de borda para Meta Graph API.

Único ponto de IO com a Cloud API:
- Webhook (verify, receive)
- HTTP client para envio e consulta de mídia
- Interpretação de respostas e erros da Meta
"""

from .http_client import WhatsAppHttpClient, create_whatsapp_http_client
from .meta_errors import WhatsAppApiError, parse_meta_error
from .responses import (
    interpret_media_response,
    interpret_send_response,
    interpret_transport_error,
)

__all__ = [
    "WhatsAppApiError",
    "WhatsAppHttpClient",
    "create_whatsapp_http_client",
    "interpret_media_response",
    "interpret_send_response",
    "interpret_transport_error",
    "parse_meta_error",
]
