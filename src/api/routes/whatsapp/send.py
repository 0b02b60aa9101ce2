"""Endpoint de envio de mensagem de texto.

POST /api/whatsapp/send
Body: {"to", "message", "type": "text"}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.routes.responses import error_response, provider_error_message, success_response
from api.routes.whatsapp.dependencies import (
    SERVICES_UNAVAILABLE_MESSAGE,
    get_whatsapp_services,
    read_json_object,
)
from api.validators.whatsapp import (
    ValidationError,
    normalize_phone_number,
    validate_required_fields,
)
from app.constants.whatsapp import MessageType
from config.logging import mask_phone

logger = logging.getLogger(__name__)

router = APIRouter()

SEND_PHONE_ERROR = "Invalid phone number format. Use international format (e.g., 14155551234)"
UNSUPPORTED_TYPE_ERROR = "Unsupported message type. Use /api/whatsapp/media for media messages."


@router.post("/send")
async def send_message(request: Request) -> JSONResponse:
    """Envia mensagem de texto para um número."""
    try:
        body = await read_json_object(request)
        validate_required_fields(body, ["to", "message"])
        to = normalize_phone_number(str(body["to"]), error_message=SEND_PHONE_ERROR)
    except ValidationError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    if body.get("type", MessageType.TEXT) != MessageType.TEXT:
        return error_response(UNSUPPORTED_TYPE_ERROR, status.HTTP_400_BAD_REQUEST)

    services = get_whatsapp_services(request)
    if services is None:
        return error_response(SERVICES_UNAVAILABLE_MESSAGE, status.HTTP_503_SERVICE_UNAVAILABLE)

    result = await services.outbound.send_text(to, str(body["message"]))
    if not result.success:
        logger.warning("send_route_failed", extra={"to": mask_phone(to)})
        return error_response(
            provider_error_message(result.error),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return success_response(
        {"messageId": result.message_id, "to": to},
        "Message sent successfully",
    )
