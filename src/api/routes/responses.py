"""Envelopes JSON das rotas de envio.

Sucesso: {"success": true, "message", "data"}
Erro:    {"success": false, "error", "statusCode"}
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class SuccessEnvelope(BaseModel):
    """Resposta de sucesso."""

    success: bool = True
    message: str = "Success"
    data: dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Resposta de erro."""

    success: bool = False
    error: str
    status_code: int = Field(serialization_alias="statusCode")


def success_response(data: dict[str, Any], message: str = "Success") -> JSONResponse:
    envelope = SuccessEnvelope(message=message, data=data)
    return JSONResponse(content=envelope.model_dump(), status_code=200)


def error_response(error: str, status_code: int = 500) -> JSONResponse:
    envelope = ErrorEnvelope(error=error, status_code=status_code)
    return JSONResponse(content=envelope.model_dump(by_alias=True), status_code=status_code)


def provider_error_message(error: dict[str, Any] | None) -> str:
    """Mensagem do erro da Meta (ou sintético) para o envelope HTTP."""
    if isinstance(error, dict):
        message = error.get("message")
        if message:
            return str(message)
    return UNKNOWN_ERROR_MESSAGE
