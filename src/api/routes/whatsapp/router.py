"""Router principal do WhatsApp: agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.whatsapp.media import router as media_router
from api.routes.whatsapp.send import router as send_router
from api.routes.whatsapp.template import router as template_router
from api.routes.whatsapp.webhook import router as webhook_router

router = APIRouter()

# Webhook (GET para challenge, POST para eventos)
router.include_router(webhook_router)

# Envio outbound
router.include_router(send_router)
router.include_router(media_router)
router.include_router(template_router)
