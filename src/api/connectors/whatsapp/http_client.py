"""Cliente HTTP especializado para WhatsApp/Meta Graph API.

Estende HttpClient genérico com:
- Header Authorization: Bearer <access_token>
- Montagem de URL a partir do endpoint do número
- Interpretação da resposta em SendResult/MediaUrlResult (nunca levanta)
- Logging estruturado sem PII (tokens, números mascarados)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success
from api.connectors.whatsapp.responses import (
    interpret_media_response,
    interpret_media_transport_error,
    interpret_send_response,
    interpret_transport_error,
)
from config.logging import mask_phone

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import MediaUrlResult, SendResult
    from config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente da Cloud API para um número de telefone.

    Valor explícito criado na inicialização e injetado em quem envia;
    não há instância global.
    """

    def __init__(
        self,
        phone_number_endpoint: str,
        api_endpoint: str,
        access_token: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente WhatsApp.

        Args:
            phone_number_endpoint: {base}/{versão}/{phone_number_id}
            api_endpoint: {base}/{versão} (consulta de mídia)
            access_token: Bearer token da Cloud API
            config: Configuração HTTP base
        """
        super().__init__(config)
        self._phone_number_endpoint = phone_number_endpoint.rstrip("/")
        self._api_endpoint = api_endpoint.rstrip("/")
        self._access_token = access_token

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }

    async def send_message(self, path: str, payload: dict[str, Any]) -> SendResult:
        """Envia payload para {phone_number_endpoint}{path}.

        Args:
            path: Path relativo (ex: /messages)
            payload: Corpo JSON já construído

        Returns:
            SendResult (sucesso ou falha; nunca levanta)
        """
        url = f"{self._phone_number_endpoint}{path}"
        to_masked = mask_phone(payload.get("to"))
        try:
            response = await self.post(url, json=payload, headers=self._auth_headers())
        except HttpError as exc:
            logger.error(
                "whatsapp_send_transport_failed",
                extra={"path": path, "to": to_masked, "error": str(exc)},
            )
            return interpret_transport_error(exc)

        result = interpret_send_response(response)
        self._log_result(result, response, "send_message")
        if result.success:
            logger.info(
                "whatsapp_message_sent",
                extra={
                    "path": path,
                    "to": to_masked,
                    "message_id": result.message_id,
                    "message_type": payload.get("type"),
                },
            )
        return result

    async def get_media_url(self, media_id: str) -> MediaUrlResult:
        """Consulta URL temporária de uma mídia recebida."""
        url = f"{self._api_endpoint}/{media_id}"
        try:
            response = await self.get(url, headers=self._auth_headers())
        except HttpError as exc:
            logger.error(
                "whatsapp_media_lookup_transport_failed",
                extra={"media_id": media_id, "error": str(exc)},
            )
            return interpret_media_transport_error(exc)

        result = interpret_media_response(response)
        if result.success:
            log_success("GET", "get_media_url", response.status_code)
        else:
            error = result.error.get("error") if isinstance(result.error, dict) else None
            log_meta_error(error, "GET", "get_media_url", response.status_code)
        return result

    @staticmethod
    def _log_result(
        result: SendResult,
        response: httpx.Response,
        operation: str,
    ) -> None:
        if result.success:
            log_success("POST", operation, response.status_code)
        else:
            log_meta_error(result.error, "POST", operation, response.status_code)


def create_whatsapp_http_client(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp a partir das settings.

    Args:
        settings: WhatsAppSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)

    Returns:
        Cliente HTTP configurado para WhatsApp.

    Raises:
        ValueError: Se phone_number_id não estiver configurado
    """
    # Import local para evitar dependência circular
    from config.settings import get_whatsapp_settings

    whatsapp = settings or get_whatsapp_settings()
    config = HttpClientConfig(
        timeout_seconds=whatsapp.request_timeout_seconds,
        transport=transport,
    )
    return WhatsAppHttpClient(
        phone_number_endpoint=whatsapp.phone_number_endpoint,
        api_endpoint=whatsapp.api_endpoint,
        access_token=whatsapp.access_token,
        config=config,
    )
