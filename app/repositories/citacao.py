"""
Repository para Citacoes.
"""

from typing import Optional
from dataclasses import dataclass

from .base import BaseRepository


@dataclass
class Citacao:
    """
    Entidade Citacao.

    Toda citacao pertence a uma colecao (colecao_id).
    """

    id: int
    titulo: str
    colecao_id: int
    texto: Optional[str] = None
    autor: Optional[str] = None
    referencia: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Citacao":
        """Cria Citacao a partir de dict do banco."""
        return cls(
            id=data["id"],
            titulo=data.get("titulo", ""),
            colecao_id=data["colecao_id"],
            texto=data.get("texto"),
            autor=data.get("autor"),
            referencia=data.get("referencia"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class CitacaoRepository(BaseRepository[Citacao]):
    """
    Repository para operacoes de Citacao.

    Filtros de listagem:
        titulo: busca parcial, sem diferenciar maiusculas
        colecao_id: apenas citacoes da colecao
    """

    TABLE = "citacoes"
    recurso_referenciado = "Colecao"

    @property
    def table_name(self) -> str:
        return self.TABLE

    @property
    def entidade(self):
        return Citacao.from_dict

    def _aplicar_filtros(self, query, filters: dict):
        if filters.get("titulo"):
            query = query.ilike("titulo", f"%{filters['titulo']}%")
        if filters.get("colecao_id") is not None:
            query = query.eq("colecao_id", filters["colecao_id"])
        return query
