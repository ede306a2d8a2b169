"""
Rotas de health check.

- /health: Liveness básico (sempre 200 se app rodando)
- /health/ready: Readiness (Supabase acessível)
"""
from fastapi import APIRouter, Depends, Response
from datetime import datetime, timezone
import logging

from app.core.config import settings
from app.repositories.colecao import ColecaoRepository
from app.services.supabase import get_supabase_client

router = APIRouter()
logger = logging.getLogger(__name__)


def get_db_factory():
    """Entrega a factory do cliente; readiness trata a falha de conexao."""
    return get_supabase_client


@router.get("/health")
async def health_check():
    """Liveness: app está de pé."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/ready")
async def readiness_check(response: Response, db_factory=Depends(get_db_factory)):
    """Readiness: Supabase responde a uma query simples."""
    try:
        db_factory().table(ColecaoRepository.TABLE).select("id").limit(1).execute()
    except Exception as e:
        logger.warning(f"Readiness falhou: {e}")
        response.status_code = 503
        return {"status": "not_ready", "checks": {"database": "error"}}

    return {"status": "ready", "checks": {"database": "ok"}}
