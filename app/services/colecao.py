"""
Service de colecoes.

Regras de negocio sobre o ColecaoRepository. Uma colecao que ainda
possui citacoes nao pode ser removida.
"""
import logging
from typing import List

from fastapi import Depends

from app.core.exceptions import ConflictError, NotFoundError
from app.repositories.colecao import Colecao, ColecaoRepository
from app.repositories.deps import get_colecao_repo
from app.schemas.colecao import ColecaoCreate, ColecaoFiltro, ColecaoUpdate

logger = logging.getLogger(__name__)


class ColecaoService:
    """Operacoes CRUD de Colecao."""

    def __init__(self, colecao_repository: ColecaoRepository):
        self.repo = colecao_repository

    async def listar(self, filtro: ColecaoFiltro) -> List[Colecao]:
        return await self.repo.listar(
            limit=filtro.limit,
            offset=filtro.offset,
            titulo=filtro.titulo,
        )

    async def buscar_por_id(self, colecao_id: int) -> Colecao:
        """
        Busca colecao por ID.

        Raises:
            NotFoundError: Se a colecao nao existe
        """
        colecao = await self.repo.buscar_por_id(colecao_id)
        if colecao is None:
            raise NotFoundError("Colecao", colecao_id)
        return colecao

    async def criar(self, dados: ColecaoCreate) -> Colecao:
        colecao = await self.repo.criar(dados.model_dump())
        logger.info(f"Colecao criada: {colecao.id}")
        return colecao

    async def atualizar(self, colecao_id: int, dados: ColecaoUpdate) -> Colecao:
        colecao = await self.repo.atualizar(colecao_id, dados.model_dump(exclude_unset=True))
        if colecao is None:
            raise NotFoundError("Colecao", colecao_id)
        return colecao

    async def remover(self, colecao_id: int) -> None:
        """
        Remove colecao vazia.

        Raises:
            NotFoundError: Se a colecao nao existe
            ConflictError: Se a colecao ainda possui citacoes
        """
        await self.buscar_por_id(colecao_id)

        total = await self.repo.contar_citacoes(colecao_id)
        if total > 0:
            logger.warning(f"Remocao bloqueada: colecao {colecao_id} possui {total} citacoes")
            raise ConflictError(
                "Colecao possui citacoes e nao pode ser removida",
                details={"id": colecao_id, "citacoes": total},
            )

        if not await self.repo.deletar(colecao_id):
            raise NotFoundError("Colecao", colecao_id)
        logger.info(f"Colecao removida: {colecao_id}")


def get_colecao_service(
    repo: ColecaoRepository = Depends(get_colecao_repo),
) -> ColecaoService:
    """Dependency FastAPI que monta o ColecaoService do request."""
    return ColecaoService(repo)
