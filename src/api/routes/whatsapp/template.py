"""Endpoint de envio de template aprovado.

POST /api/whatsapp/template
Body: {"to", "templateName", "languageCode": "en_US", "components": []}
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
from config.logging import mask_phone

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LANGUAGE_CODE = "en_US"


@router.post("/template")
async def send_template(request: Request) -> JSONResponse:
    """Envia template com código de idioma e componentes opcionais."""
    try:
        body = await read_json_object(request)
        validate_required_fields(body, ["to", "templateName"])
        to = normalize_phone_number(str(body["to"]))
        components = body.get("components") or []
        if not isinstance(components, list):
            raise ValidationError("components must be a list")
    except ValidationError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    services = get_whatsapp_services(request)
    if services is None:
        return error_response(SERVICES_UNAVAILABLE_MESSAGE, status.HTTP_503_SERVICE_UNAVAILABLE)

    template_name = str(body["templateName"])
    result = await services.outbound.send_template(
        to,
        template_name,
        language_code=str(body.get("languageCode") or DEFAULT_LANGUAGE_CODE),
        components=components,
    )
    if not result.success:
        logger.warning(
            "template_route_failed",
            extra={"to": mask_phone(to), "template_name": template_name},
        )
        return error_response(
            provider_error_message(result.error),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return success_response(
        {"messageId": result.message_id, "to": to, "templateName": template_name},
        "Template sent successfully",
    )
