"""
Configuração global de testes - Fixtures compartilhadas.

Fornece um banco em memoria que imita a chain de queries do cliente
Supabase (.table().select().eq().execute()) e um TestClient com o
banco injetado via dependency_overrides.
"""

import re
from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# BANCO EM MEMORIA
# =============================================================================


class MockResponse:
    """Imita o APIResponse do postgrest: .data e .count."""

    def __init__(self, data: list[dict], count: int | None = None):
        self.data = data
        self.count = count


def _ilike_para_regex(padrao: str) -> re.Pattern:
    partes = [re.escape(p) for p in padrao.split("%")]
    return re.compile(".*".join(partes), re.IGNORECASE | re.DOTALL)


class MockQuery:
    """Query sobre uma tabela em memoria."""

    def __init__(self, db: "MockDatabase", nome: str):
        self.db = db
        self.nome = nome
        self._operacao = "select"
        self._payload: Any = None
        self._filtros: list = []
        self._ordem: tuple[str, bool] | None = None
        self._range: tuple[int, int] | None = None
        self._limit: int | None = None
        self._count = False

    # Operacoes

    def select(self, *colunas, count=None):
        self._operacao = "select"
        self._count = count is not None
        return self

    def insert(self, data):
        self._operacao = "insert"
        self._payload = data
        return self

    def update(self, data):
        self._operacao = "update"
        self._payload = data
        return self

    def delete(self):
        self._operacao = "delete"
        return self

    # Filtros e modificadores

    def eq(self, campo, valor):
        self._filtros.append(lambda row: row.get(campo) == valor)
        return self

    def ilike(self, campo, padrao):
        regex = _ilike_para_regex(padrao)
        self._filtros.append(lambda row: regex.fullmatch(str(row.get(campo) or "")) is not None)
        return self

    def order(self, campo, desc=False):
        self._ordem = (campo, desc)
        return self

    def range(self, inicio, fim):
        self._range = (inicio, fim)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _linhas_filtradas(self) -> list[dict]:
        return [row for row in self.db.tabela(self.nome) if all(f(row) for f in self._filtros)]

    def execute(self) -> MockResponse:
        if self.db.erro is not None:
            raise self.db.erro
        if self.db.should_fail:
            raise Exception("Database error")

        tabela = self.db.tabela(self.nome)
        agora = datetime.now(timezone.utc).isoformat()

        if self._operacao == "insert":
            novas = self._payload if isinstance(self._payload, list) else [self._payload]
            criadas = []
            for dados in novas:
                row = {"id": self.db.proximo_id(self.nome), "created_at": agora, "updated_at": agora}
                row.update(dados)
                tabela.append(row)
                criadas.append(dict(row))
            return MockResponse(criadas)

        alvo = self._linhas_filtradas()

        if self._operacao == "update":
            for row in alvo:
                row.update(self._payload)
            return MockResponse([dict(row) for row in alvo])

        if self._operacao == "delete":
            ids = {row["id"] for row in alvo}
            tabela[:] = [row for row in tabela if row["id"] not in ids]
            return MockResponse([dict(row) for row in alvo])

        if self._ordem:
            campo, desc = self._ordem
            alvo = sorted(alvo, key=lambda row: row.get(campo), reverse=desc)
        total = len(alvo)
        if self._range:
            alvo = alvo[self._range[0]:self._range[1] + 1]
        if self._limit is not None:
            alvo = alvo[:self._limit]
        return MockResponse([dict(row) for row in alvo], total if self._count else None)


class MockDatabase:
    """
    Cliente Supabase em memoria.

    should_fail: toda query levanta Exception generica.
    erro: toda query levanta essa exception (ex: APIError com code).
    """

    def __init__(self, should_fail: bool = False, erro: Exception | None = None):
        self.should_fail = should_fail
        self.erro = erro
        self.tabelas: dict[str, list[dict]] = {}
        self._sequencias: dict[str, int] = {}

    def table(self, nome: str) -> MockQuery:
        return MockQuery(self, nome)

    def tabela(self, nome: str) -> list[dict]:
        return self.tabelas.setdefault(nome, [])

    def proximo_id(self, nome: str) -> int:
        self._sequencias[nome] = self._sequencias.get(nome, 0) + 1
        return self._sequencias[nome]

    def inserir(self, nome: str, **dados) -> dict:
        """Atalho de teste: grava uma linha e devolve-a com id."""
        return self.table(nome).insert(dados).execute().data[0]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def mock_db():
    """Banco em memoria vazio."""
    return MockDatabase()


@pytest.fixture
def failing_db():
    """Banco que falha em toda query."""
    return MockDatabase(should_fail=True)


@pytest.fixture
def app(mock_db):
    """App FastAPI com o banco em memoria injetado."""
    from app.main import app as citei_app
    from app.services.supabase import get_db

    citei_app.dependency_overrides[get_db] = lambda: mock_db
    yield citei_app
    citei_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Cliente de teste."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def colecao(mock_db):
    """Colecao ja persistida."""
    return mock_db.inserir("colecoes", titulo="Poesia Brasileira", descricao="Versos")


@pytest.fixture
def citacao(mock_db, colecao):
    """Citacao ja persistida dentro da fixture colecao."""
    return mock_db.inserir(
        "citacoes",
        titulo="No meio do caminho",
        texto="No meio do caminho tinha uma pedra",
        autor="Carlos Drummond de Andrade",
        referencia=None,
        colecao_id=colecao["id"],
    )
