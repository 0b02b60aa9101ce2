"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
"""

from app.services.auto_reply import AutoReplyService
from app.services.whatsapp_fixed_replies import FixedReply, match_fixed_reply

__all__ = [
    "AutoReplyService",
    "FixedReply",
    "match_fixed_reply",
]
