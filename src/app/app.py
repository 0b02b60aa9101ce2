"""Aplicação ASGI do wa_cloud_bridge.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

O lifespan cria o cliente da Cloud API uma única vez e o guarda em
`app.state.whatsapp_services`; sem PHONE_NUMBER_ID o serviço sobe mesmo
assim (rotas de envio respondem 503 e /ready fica not_ready).
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import CorrelationIdMiddleware
from api.routes import create_api_router
from api.routes.whatsapp.webhook_runtime import drain_background_tasks
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.whatsapp_factory import create_whatsapp_services
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap.whatsapp_factory import WhatsAppServices

# Logging antes de qualquer logger de módulo emitir
initialize_app()

logger = get_logger(__name__)

SERVICE_TITLE = "wa_cloud_bridge"
SERVICE_VERSION = "1.0.0"
SHUTDOWN_DRAIN_TIMEOUT_SECONDS = 30.0


def _build_services() -> WhatsAppServices | None:
    try:
        return create_whatsapp_services()
    except ValueError as exc:
        logger.warning("whatsapp_client_not_ready", extra={"error": str(exc)})
        return None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("app_starting")
    validate_runtime_settings()
    app.state.whatsapp_services = _build_services()

    yield

    cancelled = await drain_background_tasks(timeout_seconds=SHUTDOWN_DRAIN_TIMEOUT_SECONDS)
    logger.info("app_stopped", extra={"cancelled_tasks": cancelled})


def create_app() -> FastAPI:
    """Monta a aplicação: middlewares (correlation_id, CORS aberto) e rotas."""
    fastapi_app = FastAPI(
        title=SERVICE_TITLE,
        description="Ponte HTTP para a WhatsApp Cloud API",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    # Último adicionado roda primeiro: CORS responde preflight antes do resto
    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    """Servidor local (HOST/PORT do ambiente, padrão 0.0.0.0:8080)."""
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    main()
