"""Validators por canal: validação de requests antes do envio.

Estrutura:
- whatsapp/: WhatsApp Cloud API
"""

__all__: list[str] = []
