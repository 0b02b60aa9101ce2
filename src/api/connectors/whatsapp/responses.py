"""Interpretação de respostas da Graph API em resultados normalizados.

Nenhuma função aqui levanta exceção: toda resposta (ou falha de
transporte) vira SendResult/MediaUrlResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.meta_errors import build_unknown_error
from app.protocols.models import MediaUrlResult, SendResult

if TYPE_CHECKING:
    import httpx


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _extract_message_id(body: Any) -> str | None:
    """messages[0].id, se presente; ausência não é erro."""
    if not isinstance(body, dict):
        return None
    messages = body.get("messages")
    if not isinstance(messages, list) or not messages:
        return None
    first = messages[0]
    if not isinstance(first, dict):
        return None
    message_id = first.get("id")
    return message_id if isinstance(message_id, str) else None


def interpret_send_response(response: httpx.Response) -> SendResult:
    """Converte a resposta de POST /messages em SendResult.

    - 2xx: sucesso, message_id de messages[0].id
    - não-2xx: falha com body["error"] verbatim, ou erro sintético
    """
    body = _safe_json(response)

    if response.is_success:
        return SendResult(
            success=True,
            message_id=_extract_message_id(body),
            data=body if isinstance(body, dict) else None,
        )

    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        error = build_unknown_error(
            f"Request failed with status code {response.status_code}"
        )
    return SendResult(success=False, error=error)


def interpret_transport_error(exc: Exception) -> SendResult:
    """Falha de rede/timeout: nunca há resposta da Meta."""
    return SendResult(success=False, error=build_unknown_error(str(exc)))


def interpret_media_response(response: httpx.Response) -> MediaUrlResult:
    """Converte a resposta de GET /<media_id> em MediaUrlResult."""
    body = _safe_json(response)

    if response.is_success and isinstance(body, dict):
        file_size = body.get("file_size")
        return MediaUrlResult(
            success=True,
            url=body.get("url"),
            mime_type=body.get("mime_type"),
            file_size=file_size if isinstance(file_size, int) else None,
        )

    return MediaUrlResult(
        success=False,
        error=body if body is not None else f"Request failed with status code {response.status_code}",
    )


def interpret_media_transport_error(exc: Exception) -> MediaUrlResult:
    return MediaUrlResult(success=False, error=str(exc))
