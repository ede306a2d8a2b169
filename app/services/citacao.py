"""
Service de citacoes.

Garante que toda citacao aponte para uma colecao existente antes de
gravar, consultando o ColecaoRepository.
"""
import logging
from typing import List

from fastapi import Depends

from app.core.exceptions import NotFoundError
from app.repositories.citacao import Citacao, CitacaoRepository
from app.repositories.colecao import ColecaoRepository
from app.repositories.deps import get_citacao_repo, get_colecao_repo
from app.schemas.citacao import CitacaoCreate, CitacaoFiltro, CitacaoUpdate

logger = logging.getLogger(__name__)


class CitacaoService:
    """Operacoes CRUD de Citacao."""

    def __init__(
        self,
        citacao_repository: CitacaoRepository,
        colecao_repository: ColecaoRepository,
    ):
        self.repo = citacao_repository
        self.colecao_repo = colecao_repository

    async def _garantir_colecao(self, colecao_id: int) -> None:
        if not await self.colecao_repo.existe(colecao_id):
            logger.warning(f"Citacao referencia colecao inexistente: {colecao_id}")
            raise NotFoundError("Colecao", colecao_id)

    async def listar(self, filtro: CitacaoFiltro) -> List[Citacao]:
        return await self.repo.listar(
            limit=filtro.limit,
            offset=filtro.offset,
            titulo=filtro.titulo,
            colecao_id=filtro.colecao_id,
        )

    async def buscar_por_id(self, citacao_id: int) -> Citacao:
        """
        Busca citacao por ID.

        Raises:
            NotFoundError: Se a citacao nao existe
        """
        citacao = await self.repo.buscar_por_id(citacao_id)
        if citacao is None:
            raise NotFoundError("Citacao", citacao_id)
        return citacao

    async def criar(self, dados: CitacaoCreate) -> Citacao:
        """
        Cria citacao numa colecao existente.

        Raises:
            NotFoundError: Se colecao_id nao existe
        """
        await self._garantir_colecao(dados.colecao_id)
        citacao = await self.repo.criar(dados.model_dump())
        logger.info(f"Citacao criada: {citacao.id} (colecao {citacao.colecao_id})")
        return citacao

    async def atualizar(self, citacao_id: int, dados: CitacaoUpdate) -> Citacao:
        """
        Atualiza os campos enviados.

        Raises:
            NotFoundError: Se a citacao, ou a nova colecao, nao existe
        """
        campos = dados.model_dump(exclude_unset=True)
        if "colecao_id" in campos:
            await self._garantir_colecao(campos["colecao_id"])

        citacao = await self.repo.atualizar(citacao_id, campos)
        if citacao is None:
            raise NotFoundError("Citacao", citacao_id)
        return citacao

    async def remover(self, citacao_id: int) -> None:
        if not await self.repo.deletar(citacao_id):
            raise NotFoundError("Citacao", citacao_id)
        logger.info(f"Citacao removida: {citacao_id}")


def get_citacao_service(
    repo: CitacaoRepository = Depends(get_citacao_repo),
    colecao_repo: ColecaoRepository = Depends(get_colecao_repo),
) -> CitacaoService:
    """Dependency FastAPI que monta o CitacaoService do request."""
    return CitacaoService(repo, colecao_repo)
