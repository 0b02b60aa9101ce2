"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, envio, health)
- Validação inicial de request (query params, campos obrigatórios)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/whatsapp/: webhook e envio
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
