"""Settings do canal WhatsApp (Cloud API).

Tudo vem do ambiente; credenciais não têm default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base.core import parse_environment

GRAPH_API_VERSION: str = "v21.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

PROCESSING_MODES = ("async", "inline")

# atributo -> variável de ambiente obrigatória
_REQUIRED_CREDENTIALS: tuple[tuple[str, str], ...] = (
    ("phone_number_id", "WHATSAPP_PHONE_NUMBER_ID"),
    ("access_token", "WHATSAPP_ACCESS_TOKEN"),
    ("verify_token", "WHATSAPP_VERIFY_TOKEN"),
)


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        verify_token: Token estático do handshake (hub.verify_token)
        access_token: Bearer token da Cloud API
        phone_number_id: Número remetente no Meta Business
        business_account_id: WABA, opcional (só informativo)
        api_version / api_base_url: Montagem das URLs da Graph API
        request_timeout_seconds: Timeout de cada chamada HTTP
        webhook_processing_mode: async (task de background) ou inline
    """

    verify_token: str = ""
    access_token: str = ""
    phone_number_id: str = ""
    business_account_id: str = ""

    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    request_timeout_seconds: float = 30.0
    webhook_processing_mode: str = "async"

    @property
    def api_endpoint(self) -> str:
        """{base}/{versão}, usado na consulta de mídia."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    @property
    def phone_number_endpoint(self) -> str:
        """{base}/{versão}/{phone_number_id}, base de todos os envios.

        Raises:
            ValueError: Se phone_number_id não configurado.
        """
        if not self.phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{self.phone_number_id}"

    def validate(self) -> list[str]:
        """Lista de erros de configuração (vazia = ok)."""
        errors = [
            f"{env_name} não configurado"
            for attr, env_name in _REQUIRED_CREDENTIALS
            if not getattr(self, attr)
        ]
        if not self.api_version:
            errors.append("WHATSAPP_API_VERSION não pode ser vazio")
        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.webhook_processing_mode not in PROCESSING_MODES:
            errors.append("WHATSAPP_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'")
        return errors


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _load_from_env() -> WhatsAppSettings:
    # Em testes o webhook processa inline por padrão
    under_test = parse_environment(_env("ENVIRONMENT", "development")) == "test"
    return WhatsAppSettings(
        verify_token=_env("WHATSAPP_VERIFY_TOKEN"),
        access_token=_env("WHATSAPP_ACCESS_TOKEN"),
        phone_number_id=_env("WHATSAPP_PHONE_NUMBER_ID"),
        business_account_id=_env("WHATSAPP_BUSINESS_ACCOUNT_ID"),
        api_version=_env("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=_env("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(_env("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")),
        webhook_processing_mode=_env(
            "WHATSAPP_WEBHOOK_PROCESSING_MODE",
            "inline" if under_test else "async",
        ).lower(),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Instância cacheada; use `cache_clear()` após alterar o ambiente."""
    return _load_from_env()
