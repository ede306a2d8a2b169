"""
Dependency Injection para Repositories.

Uso em endpoints:
    from app.repositories.deps import get_citacao_repo

    @router.get("/citacao/{id}")
    async def buscar(id: int, repo: CitacaoRepository = Depends(get_citacao_repo)):
        return await repo.buscar_por_id(id)

Em testes, sobrescreva `get_db` em `app.dependency_overrides` para
trocar o banco de todos os repositories de uma vez.
"""
from fastapi import Depends

from app.services.supabase import get_db
from .citacao import CitacaoRepository
from .colecao import ColecaoRepository


def get_citacao_repo(db=Depends(get_db)) -> CitacaoRepository:
    """Retorna CitacaoRepository ligado ao cliente de banco do request."""
    return CitacaoRepository(db)


def get_colecao_repo(db=Depends(get_db)) -> ColecaoRepository:
    """Retorna ColecaoRepository ligado ao cliente de banco do request."""
    return ColecaoRepository(db)
