"""Middlewares HTTP da API."""

from api.middleware.correlation import CorrelationIdMiddleware

__all__ = ["CorrelationIdMiddleware"]
