"""
Repository para Colecoes.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from app.core.exceptions import DatabaseError
from .base import BaseRepository
from .citacao import CitacaoRepository

logger = logging.getLogger(__name__)


@dataclass
class Colecao:
    """
    Entidade Colecao.

    Agrupa zero ou mais citacoes.
    """

    id: int
    titulo: str
    descricao: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Colecao":
        """Cria Colecao a partir de dict do banco."""
        return cls(
            id=data["id"],
            titulo=data.get("titulo", ""),
            descricao=data.get("descricao"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class ColecaoRepository(BaseRepository[Colecao]):
    """
    Repository para operacoes de Colecao.

    Uso:
        repo = ColecaoRepository(supabase)
        colecoes = await repo.listar(titulo="poesia")
    """

    TABLE = "colecoes"

    @property
    def table_name(self) -> str:
        return self.TABLE

    @property
    def entidade(self):
        return Colecao.from_dict

    def _aplicar_filtros(self, query, filters: dict):
        if filters.get("titulo"):
            query = query.ilike("titulo", f"%{filters['titulo']}%")
        return query

    async def contar_citacoes(self, colecao_id: int) -> int:
        """Conta citacoes que pertencem a colecao."""
        try:
            response = (
                self.db.table(CitacaoRepository.TABLE)
                .select("id", count="exact")
                .eq("colecao_id", colecao_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Erro ao contar citacoes da colecao {colecao_id}: {e}")
            raise DatabaseError(
                "Erro ao contar citacoes",
                details={"colecao_id": colecao_id},
                original_error=e,
            ) from e

        return response.count or 0
