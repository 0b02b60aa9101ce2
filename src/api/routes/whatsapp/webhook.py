"""Webhook da Cloud API.

GET  /api/whatsapp/webhook  handshake (hub.challenge em texto puro ou 403)
POST /api/whatsapp/webhook  eventos; 200 {"success": true} sem esperar o
                            auto-responder, salvo no modo inline
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from api.connectors.whatsapp.webhook import (
    InvalidJsonError,
    WebhookChallenge,
    WebhookChallengeError,
    parse_webhook_body,
    verify_webhook_challenge,
)
from api.routes.whatsapp.dependencies import get_whatsapp_services
from api.routes.whatsapp.webhook_runtime import dispatch_inbound_processing
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_whatsapp_settings

logger = logging.getLogger(__name__)

router = APIRouter()

_ACK = {"success": True}


def _json_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@router.get("/webhook")
async def verify_webhook(request: Request) -> Response:
    """Responde ao handshake de assinatura da Meta."""
    challenge = WebhookChallenge.from_query_params(request.query_params)
    try:
        echoed = verify_webhook_challenge(challenge, get_whatsapp_settings().verify_token)
    except WebhookChallengeError as exc:
        logger.warning("webhook_verification_failed", extra={"reason": str(exc)})
        return _json_error("Verification failed", status.HTTP_403_FORBIDDEN)

    logger.info("webhook_verified")
    return PlainTextResponse(content=echoed, status_code=status.HTTP_200_OK)


@router.post("/webhook")
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebe um envelope e despacha o processamento."""
    # Header ausente: mantém o id do middleware, ou gera um novo
    token = set_correlation_id(
        request.headers.get(CORRELATION_ID_HEADER) or get_correlation_id() or None
    )
    try:
        return await _accept_envelope(request)
    finally:
        reset_correlation_id(token)


async def _accept_envelope(request: Request) -> JSONResponse:
    raw_body = await request.body()
    try:
        envelope = parse_webhook_body(raw_body)
    except InvalidJsonError:
        logger.warning("webhook_json_invalid", extra={"payload_size": len(raw_body)})
        return _json_error("Invalid JSON", status.HTTP_400_BAD_REQUEST)

    logger.info("webhook_received", extra={"payload_size": len(raw_body)})

    services = get_whatsapp_services(request)
    try:
        await dispatch_inbound_processing(
            payload=envelope,
            correlation_id=get_correlation_id(),
            settings=get_whatsapp_settings(),
            use_case=services.inbound if services is not None else None,
        )
    except Exception:
        logger.exception("webhook_dispatch_failed")
        return _json_error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(content=_ACK, status_code=status.HTTP_200_OK)
