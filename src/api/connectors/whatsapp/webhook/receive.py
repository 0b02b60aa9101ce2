"""Parse inicial do corpo do webhook (sem PII)."""

from __future__ import annotations

import json


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_body(raw_body: bytes) -> object:
    """Parseia o corpo JSON do webhook.

    O resultado não é validado além do JSON: qualquer formato é
    repassado ao normalizer, que trata envelopes inesperados.

    Raises:
        InvalidJsonError: Se o corpo não for JSON válido
    """
    try:
        return json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc
