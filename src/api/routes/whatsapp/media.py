"""Endpoint de envio de mídia por link.

POST /api/whatsapp/media
Body: {"to", "mediaUrl", "mediaType", "caption"?, "filename"?}
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
    validate_media_type,
    validate_required_fields,
)
from config.logging import mask_phone

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/media")
async def send_media(request: Request) -> JSONResponse:
    """Envia imagem, vídeo, documento ou áudio a partir de URL pública."""
    try:
        body = await read_json_object(request)
        validate_required_fields(body, ["to", "mediaUrl", "mediaType"])
        media_type = validate_media_type(body["mediaType"])
        to = normalize_phone_number(str(body["to"]))
    except ValidationError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    services = get_whatsapp_services(request)
    if services is None:
        return error_response(SERVICES_UNAVAILABLE_MESSAGE, status.HTTP_503_SERVICE_UNAVAILABLE)

    result = await services.outbound.send_media(
        to,
        media_type,
        str(body["mediaUrl"]),
        caption=str(body.get("caption") or ""),
        filename=str(body.get("filename") or ""),
    )
    if not result.success:
        logger.warning(
            "media_route_failed",
            extra={"to": mask_phone(to), "media_type": media_type},
        )
        return error_response(
            provider_error_message(result.error),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return success_response(
        {"messageId": result.message_id, "to": to, "mediaType": media_type.value},
        "Media sent successfully",
    )
