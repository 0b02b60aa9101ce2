"""Erros de validação de requests de envio."""


class ValidationError(ValueError):
    """Input de envio inválido (mapeado para HTTP 400 nas rotas)."""
