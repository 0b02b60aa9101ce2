"""Cliente HTTP base para conectores da camada API.

Uma chamada = um request. Sem retry nem backoff: falhas de transporte
sobem como HttpError para o chamador decidir o que fazer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# InvalidURL não herda de HTTPError; header não-ASCII levanta UnicodeEncodeError (ValueError)
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `transport` permite injetar um httpx.MockTransport em testes.
    """

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de transporte HTTP (timeout, conexão, URL ou header inválido) sem dados sensíveis."""


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            transport=self._config.transport,
        )

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; qualquer status HTTP é retornado ao chamador."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with self._new_client() as client:
                return await client.post(url, json=json, headers=merged_headers)
        except _TRANSPORT_ERRORS as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": "POST", "error_type": type(exc).__name__},
            )
            raise HttpError(str(exc) or type(exc).__name__) from exc

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """GET; qualquer status HTTP é retornado ao chamador."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with self._new_client() as client:
                return await client.get(url, headers=merged_headers)
        except _TRANSPORT_ERRORS as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": "GET", "error_type": type(exc).__name__},
            )
            raise HttpError(str(exc) or type(exc).__name__) from exc
