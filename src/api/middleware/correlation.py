"""Middleware que define o correlation_id de cada request HTTP.

Usa o header X-Correlation-Id quando presente; caso contrário gera um
UUID. O valor é devolvido no mesmo header da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Injeta correlation_id no contexto durante o request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        try:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
            return response
        finally:
            reset_correlation_id(token)
