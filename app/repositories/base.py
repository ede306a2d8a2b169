"""
Base Repository - Interface comum para todos os repositories.

Define o contrato que CitacaoRepository e ColecaoRepository seguem
e a implementacao padrao das operacoes CRUD sobre uma tabela do
Supabase. Subclasses informam a tabela, a entidade e os filtros.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional, List, Any, Callable

from app.core.exceptions import (
    CiteiException,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type variable para entidades
T = TypeVar('T')

# Codigos SQLSTATE do Postgres
CODIGO_FK_VIOLADA = "23503"
CODIGOS_VALOR_INVALIDO = ("23514", "22003", "22P02")


class BaseRepository(ABC, Generic[T]):
    """
    Interface base para repositories.

    Attributes:
        db: Cliente de banco de dados (Supabase ou double de teste)
        table_name: Nome da tabela no banco de dados
        recurso_referenciado: Entidade apontada pela FK da tabela, se houver

    Falhas do cliente sao logadas e relancadas como DatabaseError, salvo
    FK violada (ConflictError/NotFoundError) e valor recusado pelo banco
    (ValidationError). Linha ausente nao e erro aqui: buscar/atualizar
    retornam None e deletar retorna False.
    """

    recurso_referenciado: Optional[str] = None

    def __init__(self, db_client: Any):
        self.db = db_client

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Nome da tabela no banco."""
        pass

    @property
    @abstractmethod
    def entidade(self) -> Callable[[dict], T]:
        """Construtor da entidade a partir de uma linha do banco."""
        pass

    def _aplicar_filtros(self, query, filters: dict):
        """Aplica filtros especificos da entidade. Padrao: nenhum."""
        return query

    def _falha(self, operacao: str, error: Exception, escrita: Optional[str] = None) -> CiteiException:
        """
        Converte erro do cliente em exception da API.

        Codigos do Postgres repassados pelo PostgREST viram erros de
        dominio. `escrita` indica "criar", "atualizar" ou "deletar"
        para decidir o que uma FK violada significa.
        """
        codigo = getattr(error, "code", None)
        logger.error(f"Erro ao {operacao} em {self.table_name}: {error} (code={codigo})")

        if codigo == CODIGO_FK_VIOLADA:
            if escrita == "deletar":
                return ConflictError(
                    f"Registro de {self.table_name} ainda referenciado",
                    details={"table": self.table_name},
                    original_error=error,
                )
            if escrita in ("criar", "atualizar") and self.recurso_referenciado:
                return NotFoundError(self.recurso_referenciado)
        if codigo in CODIGOS_VALOR_INVALIDO:
            return ValidationError(
                f"Valor rejeitado pelo banco ao {operacao}",
                details={"table": self.table_name, "code": codigo},
                original_error=error,
            )
        return DatabaseError(
            f"Erro ao {operacao}",
            details={"table": self.table_name},
            original_error=error,
        )

    async def buscar_por_id(self, id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade ou None se nao encontrada
        """
        try:
            response = self.db.table(self.table_name).select("*").eq("id", id).execute()
        except Exception as e:
            raise self._falha(f"buscar id {id}", e) from e

        if response.data:
            return self.entidade(response.data[0])
        return None

    async def listar(
        self,
        limit: int = 100,
        offset: int = 0,
        **filters
    ) -> List[T]:
        """
        Lista entidades com filtros opcionais, ordenadas por id.

        Args:
            limit: Maximo de resultados
            offset: Pular N primeiros resultados
            **filters: Filtros aceitos pela subclasse (ex: titulo="x")
        """
        try:
            query = self.db.table(self.table_name).select("*")
            query = self._aplicar_filtros(query, filters)
            response = query.order("id").range(offset, offset + limit - 1).execute()
        except Exception as e:
            raise self._falha("listar", e) from e

        return [self.entidade(item) for item in response.data or []]

    async def criar(self, data: dict) -> T:
        """
        Cria nova entidade.

        Returns:
            Entidade criada com ID
        """
        try:
            response = self.db.table(self.table_name).insert(data).execute()
        except Exception as e:
            raise self._falha("criar", e, escrita="criar") from e

        if not response.data:
            raise DatabaseError(
                "Insert nao retornou dados",
                details={"table": self.table_name},
            )
        criada = self.entidade(response.data[0])
        logger.info(f"{self.table_name}: registro criado {response.data[0].get('id')}")
        return criada

    async def atualizar(self, id: int, data: dict) -> Optional[T]:
        """
        Atualiza entidade existente.

        Returns:
            Entidade atualizada ou None se nao encontrada
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        try:
            response = self.db.table(self.table_name).update(data).eq("id", id).execute()
        except Exception as e:
            raise self._falha(f"atualizar id {id}", e, escrita="atualizar") from e

        if response.data:
            logger.info(f"{self.table_name}: registro atualizado {id}")
            return self.entidade(response.data[0])
        return None

    async def deletar(self, id: int) -> bool:
        """
        Deleta entidade.

        Returns:
            True se deletou, False se nao encontrada
        """
        try:
            response = self.db.table(self.table_name).delete().eq("id", id).execute()
        except Exception as e:
            raise self._falha(f"deletar id {id}", e, escrita="deletar") from e

        if response.data:
            logger.info(f"{self.table_name}: registro removido {id}")
            return True
        return False

    # Metodos utilitarios

    async def existe(self, id: int) -> bool:
        """Verifica se entidade existe."""
        return await self.buscar_por_id(id) is not None

    async def contar(self, **filters) -> int:
        """Conta entidades com filtros."""
        try:
            query = self.db.table(self.table_name).select("id", count="exact")
            query = self._aplicar_filtros(query, filters)
            response = query.execute()
        except Exception as e:
            raise self._falha("contar", e) from e

        return response.count or 0
