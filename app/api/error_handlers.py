"""
Exception handlers para FastAPI.

Ponto unico de recuperacao de erros dos handlers: routes nao fazem
try/except, as exceptions sobem ate aqui e viram status + corpo JSON.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    CiteiException,
    DatabaseError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

# Status unico para falha de validacao, nos dois recursos
VALIDATION_STATUS_CODE = 422

STATUS_POR_EXCEPTION = {
    NotFoundError: 404,
    ConflictError: 409,
    ValidationError: VALIDATION_STATUS_CODE,
    DatabaseError: 503,
    ConfigurationError: 500,
}


def formatar_erros_validacao(exc: RequestValidationError) -> list[dict]:
    """
    Converte os erros do pydantic em lista por campo, na ordem reportada.

    Cada item: {"location", "field", "msg", "type"}.
    """
    erros = []
    for erro in exc.errors():
        loc = [str(parte) for parte in erro.get("loc", ())]
        erros.append({
            "location": loc[0] if loc else "body",
            "field": ".".join(loc[1:]),
            "msg": erro.get("msg", ""),
            "type": erro.get("type", ""),
        })
    return erros


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler para payload/query/path invalidos."""
    erros = formatar_erros_validacao(exc)
    logger.info(
        f"Validacao falhou em {request.method} {request.url.path}: {len(erros)} erro(s)",
        extra={"path": request.url.path},
    )
    return JSONResponse(status_code=VALIDATION_STATUS_CODE, content={"errors": erros})


async def citei_exception_handler(request: Request, exc: CiteiException) -> JSONResponse:
    """Handler para todas as exceptions customizadas."""
    status_code = 500
    error_type = exc.__class__.__name__

    for tipo, status in STATUS_POR_EXCEPTION.items():
        if isinstance(exc, tipo):
            status_code = status
            break

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"{error_type}: {exc.message}",
        extra={"error_type": error_type, "details": exc.details, "path": request.url.path},
    )

    return JSONResponse(
        status_code=status_code,
        content={"error": error_type, "message": exc.message, "details": exc.details},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler para exceptions nao tratadas."""
    logger.exception(f"Erro nao tratado: {exc}", extra={"path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "error": "InternalServerError",
            "message": "Erro interno do servidor",
            "details": {},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Registra todos os exception handlers no app FastAPI.

    Usage:
        from app.api.error_handlers import register_exception_handlers

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CiteiException, citei_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
