"""Payload builders: construção de payloads para a API externa.

Estrutura:
- whatsapp/: Cloud API do WhatsApp
"""

__all__: list[str] = []
