"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_whatsapp_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: settings WhatsApp válidas e cliente criado."""
    settings_errors = get_whatsapp_settings().validate()
    client_ready = getattr(request.app.state, "whatsapp_services", None) is not None
    ready = not settings_errors and client_ready

    if not ready:
        logger.info(
            "readiness_not_ready",
            extra={"settings_error_count": len(settings_errors), "client_ready": client_ready},
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "whatsapp_settings": {
                "status": "ok" if not settings_errors else "failed",
                "errors": settings_errors,
            },
            "whatsapp_client": {"status": "ok" if client_ready else "failed"},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
