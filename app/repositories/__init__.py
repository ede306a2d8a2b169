"""
Repositories - Camada de acesso a dados.

Implementa o padrao Repository para desacoplar a logica de negocio
do banco de dados (Supabase).

Uso com dependency injection:
    from fastapi import Depends
    from app.repositories import ColecaoRepository
    from app.repositories.deps import get_colecao_repo

    @router.get("/colecao/{id}")
    async def buscar_colecao(
        id: int,
        repo: ColecaoRepository = Depends(get_colecao_repo)
    ):
        return await repo.buscar_por_id(id)

Entidades disponiveis:
- Citacao: Uma citacao pertencente a uma colecao
- Colecao: Agrupamento nomeado de citacoes
"""

from .base import BaseRepository
from .citacao import CitacaoRepository, Citacao
from .colecao import ColecaoRepository, Colecao
from .deps import get_citacao_repo, get_colecao_repo

__all__ = [
    # Base
    "BaseRepository",
    # Citacao
    "CitacaoRepository",
    "Citacao",
    # Colecao
    "ColecaoRepository",
    "Colecao",
    # Dependency injection
    "get_citacao_repo",
    "get_colecao_repo",
]
