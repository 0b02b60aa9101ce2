"""Coordenação inbound (webhook -> use case)."""

from app.coordinators.whatsapp.inbound.handler import process_inbound_payload

__all__ = ["process_inbound_payload"]
