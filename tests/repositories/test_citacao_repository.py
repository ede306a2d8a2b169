"""
Testes para CitacaoRepository.

Usa o MockDatabase do conftest: nada de patch de import.
"""
import pytest

from postgrest.exceptions import APIError

from app.core.exceptions import DatabaseError, NotFoundError, ValidationError
from app.repositories.citacao import CitacaoRepository, Citacao


class TestCitacaoFromDict:
    """Testes para Citacao.from_dict."""

    def test_cria_citacao_com_dados_completos(self):
        """Deve criar citacao com todos os campos."""
        data = {
            "id": 7,
            "titulo": "Soneto",
            "colecao_id": 2,
            "texto": "Amor e fogo que arde sem se ver",
            "autor": "Camoes",
            "referencia": "Rimas, 1595",
            "created_at": "2024-01-01T00:00:00+00:00",
        }

        citacao = Citacao.from_dict(data)

        assert citacao.id == 7
        assert citacao.colecao_id == 2
        assert citacao.autor == "Camoes"
        assert citacao.referencia == "Rimas, 1595"

    def test_campos_opcionais_ficam_none(self):
        """Deve aceitar apenas id, titulo e colecao_id."""
        citacao = Citacao.from_dict({"id": 1, "titulo": "x", "colecao_id": 3})

        assert citacao.texto is None
        assert citacao.autor is None
        assert citacao.updated_at is None


class TestCitacaoRepository:
    """Testes para CitacaoRepository."""

    @pytest.mark.asyncio
    async def test_buscar_por_id_encontra_citacao(self, mock_db, citacao):
        repo = CitacaoRepository(mock_db)

        encontrada = await repo.buscar_por_id(citacao["id"])

        assert encontrada is not None
        assert encontrada.titulo == "No meio do caminho"

    @pytest.mark.asyncio
    async def test_buscar_por_id_retorna_none_quando_nao_encontra(self, mock_db):
        repo = CitacaoRepository(mock_db)

        assert await repo.buscar_por_id(999) is None

    @pytest.mark.asyncio
    async def test_buscar_por_id_levanta_database_error_em_falha(self, failing_db):
        """Falha do cliente nao vira None: sobe como DatabaseError."""
        repo = CitacaoRepository(failing_db)

        with pytest.raises(DatabaseError) as exc_info:
            await repo.buscar_por_id(1)

        assert exc_info.value.details["table"] == "citacoes"
        assert exc_info.value.original_error is not None

    @pytest.mark.asyncio
    async def test_listar_filtra_por_titulo_sem_diferenciar_maiusculas(self, mock_db, colecao):
        mock_db.inserir("citacoes", titulo="Cancao do Exilio", colecao_id=colecao["id"])
        mock_db.inserir("citacoes", titulo="Exilio interior", colecao_id=colecao["id"])
        mock_db.inserir("citacoes", titulo="Ode ao burgues", colecao_id=colecao["id"])
        repo = CitacaoRepository(mock_db)

        citacoes = await repo.listar(titulo="exilio")

        assert [c.titulo for c in citacoes] == ["Cancao do Exilio", "Exilio interior"]

    @pytest.mark.asyncio
    async def test_listar_filtra_por_colecao(self, mock_db, colecao):
        outra = mock_db.inserir("colecoes", titulo="Outra")
        mock_db.inserir("citacoes", titulo="A", colecao_id=colecao["id"])
        mock_db.inserir("citacoes", titulo="B", colecao_id=outra["id"])
        repo = CitacaoRepository(mock_db)

        citacoes = await repo.listar(colecao_id=outra["id"])

        assert len(citacoes) == 1
        assert citacoes[0].titulo == "B"

    @pytest.mark.asyncio
    async def test_listar_respeita_limit_e_offset(self, mock_db, colecao):
        for i in range(5):
            mock_db.inserir("citacoes", titulo=f"Citacao {i}", colecao_id=colecao["id"])
        repo = CitacaoRepository(mock_db)

        pagina = await repo.listar(limit=2, offset=2)

        assert [c.titulo for c in pagina] == ["Citacao 2", "Citacao 3"]

    @pytest.mark.asyncio
    async def test_listar_retorna_lista_vazia_quando_nenhuma(self, mock_db):
        repo = CitacaoRepository(mock_db)

        assert await repo.listar() == []

    @pytest.mark.asyncio
    async def test_criar_retorna_citacao_com_id(self, mock_db, colecao):
        repo = CitacaoRepository(mock_db)

        citacao = await repo.criar({"titulo": "Nova", "colecao_id": colecao["id"]})

        assert citacao.id == 1
        assert citacao.titulo == "Nova"
        assert citacao.created_at is not None

    @pytest.mark.asyncio
    async def test_atualizar_altera_campos_e_updated_at(self, mock_db, citacao):
        repo = CitacaoRepository(mock_db)

        atualizada = await repo.atualizar(citacao["id"], {"autor": "Drummond"})

        assert atualizada.autor == "Drummond"
        assert atualizada.titulo == citacao["titulo"]
        assert atualizada.updated_at >= citacao["updated_at"]

    @pytest.mark.asyncio
    async def test_atualizar_retorna_none_quando_nao_encontra(self, mock_db):
        repo = CitacaoRepository(mock_db)

        assert await repo.atualizar(42, {"autor": "x"}) is None

    @pytest.mark.asyncio
    async def test_deletar_remove_linha(self, mock_db, citacao):
        repo = CitacaoRepository(mock_db)

        assert await repo.deletar(citacao["id"]) is True
        assert await repo.buscar_por_id(citacao["id"]) is None

    @pytest.mark.asyncio
    async def test_deletar_retorna_false_quando_nao_encontra(self, mock_db):
        repo = CitacaoRepository(mock_db)

        assert await repo.deletar(42) is False

    @pytest.mark.asyncio
    async def test_existe_e_contar(self, mock_db, citacao, colecao):
        repo = CitacaoRepository(mock_db)

        assert await repo.existe(citacao["id"]) is True
        assert await repo.existe(999) is False
        assert await repo.contar(colecao_id=colecao["id"]) == 1


def _erro_postgres(code: str) -> APIError:
    return APIError({"message": "erro do banco", "code": code, "hint": None, "details": None})


class TestCitacaoRepositoryErrosDoBanco:
    """Codigos do Postgres viram exceptions de dominio."""

    @pytest.mark.asyncio
    async def test_criar_com_colecao_inexistente_levanta_not_found(self, mock_db):
        mock_db.erro = _erro_postgres("23503")
        repo = CitacaoRepository(mock_db)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.criar({"titulo": "x", "colecao_id": 77})

        assert exc_info.value.resource == "Colecao"

    @pytest.mark.asyncio
    async def test_atualizar_com_colecao_inexistente_levanta_not_found(self, mock_db):
        mock_db.erro = _erro_postgres("23503")
        repo = CitacaoRepository(mock_db)

        with pytest.raises(NotFoundError):
            await repo.atualizar(1, {"colecao_id": 77})

    @pytest.mark.asyncio
    async def test_valor_fora_do_intervalo_levanta_validation_error(self, mock_db):
        mock_db.erro = _erro_postgres("22003")
        repo = CitacaoRepository(mock_db)

        with pytest.raises(ValidationError) as exc_info:
            await repo.buscar_por_id(1)

        assert exc_info.value.details == {"table": "citacoes", "code": "22003"}

    @pytest.mark.asyncio
    async def test_codigo_desconhecido_levanta_database_error(self, mock_db):
        mock_db.erro = _erro_postgres("08006")
        repo = CitacaoRepository(mock_db)

        with pytest.raises(DatabaseError) as exc_info:
            await repo.listar()

        assert isinstance(exc_info.value.original_error, APIError)
