"""Settings base do serviço.

Configurações comuns (ambiente, nome do serviço, logging).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "test", "staging", "production"]

DEFAULT_SERVICE_NAME = "wa_cloud_bridge"

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_VALID_LOG_FORMATS = frozenset({"json", "text"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução
        service_name: Nome do serviço para logs
        log_level: Nível de log do root logger
        log_format: json (padrão) ou text
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_strict(self) -> bool:
        """True quando configuração inválida deve impedir o boot."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.log_format not in _VALID_LOG_FORMATS:
            errors.append("LOG_FORMAT deve ser 'json' ou 'text'")

        return errors


def parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    if env_lower in ("test", "testing"):
        return "test"
    return "development"


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "json").lower(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
