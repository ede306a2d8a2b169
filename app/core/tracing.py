"""
Tracing - Correlation ID por requisição.

Cada request HTTP recebe um trace_id (gerado ou lido do header
X-Trace-ID). O id fica num ContextVar, então qualquer log emitido
durante o request (routes, services, repositories) sai com ele.

Uso:
    from app.core.tracing import get_trace_id

    logger.info(f"[{get_trace_id()}] Criando citacao")
"""
import uuid
from contextvars import ContextVar
from typing import Optional

_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)


def generate_trace_id() -> str:
    """Retorna os primeiros 8 caracteres hex de um UUID4."""
    return uuid.uuid4().hex[:8]


def set_trace_id(trace_id: str) -> None:
    """Define trace ID para o contexto atual."""
    _trace_id_var.set(trace_id)


def get_trace_id() -> Optional[str]:
    """Retorna trace ID do contexto atual, ou None fora de um request."""
    return _trace_id_var.get()


def clear_trace_id() -> None:
    """Limpa trace ID do contexto ao fim do request."""
    _trace_id_var.set(None)
