"""
Middlewares da API.
"""
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.api.error_handlers import generic_exception_handler
from app.core.tracing import (
    generate_trace_id,
    set_trace_id,
    clear_trace_id,
)

logger = logging.getLogger(__name__)


class TracingMiddleware(BaseHTTPMiddleware):
    """
    Middleware que adiciona trace_id a cada request.

    - Usa o header X-Trace-ID quando enviado, senao gera um novo
    - Propaga via context var para o codigo async do request
    - Retorna o id no header X-Trace-ID da response, inclusive nos 500
    - Loga metodo, path, status e duracao

    Uso:
        from app.api.middleware import TracingMiddleware
        app.add_middleware(TracingMiddleware)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get("X-Trace-ID") or generate_trace_id()
        set_trace_id(trace_id)

        start_time = time.time()

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            logger.info(
                f"{request.method} {request.url.path} "
                f"→ {response.status_code} ({int(duration * 1000)}ms)"
            )

            response.headers["X-Trace-ID"] = trace_id
            return response

        except Exception as e:
            # Exception nao tratada: responde aqui para o 500 sair com o trace_id
            duration = time.time() - start_time
            logger.error(
                f"{request.method} {request.url.path} "
                f"→ ERROR ({int(duration * 1000)}ms): {e}"
            )
            response = await generic_exception_handler(request, e)
            response.headers["X-Trace-ID"] = trace_id
            return response

        finally:
            clear_trace_id()
