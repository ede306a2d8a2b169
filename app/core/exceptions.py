"""
Exceptions customizadas da API Citei.
"""
from typing import Optional


class CiteiException(Exception):
    """Base exception para todos os erros do sistema."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DatabaseError(CiteiException):
    """Erro de banco de dados (Supabase)."""
    pass


class ValidationError(CiteiException):
    """Regra de negocio violada pelos dados de entrada."""
    pass


class NotFoundError(CiteiException):
    """Recurso nao encontrado."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[int | str] = None
    ):
        self.resource = resource
        message = f"{resource} nao encontrada"
        details = {}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, details)


class ConflictError(CiteiException):
    """Operacao conflita com o estado atual do recurso."""
    pass


class ConfigurationError(CiteiException):
    """Erro de configuracao do sistema."""
    pass
