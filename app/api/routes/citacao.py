"""
Endpoints CRUD de citacoes.

Validacao fica nos schemas (falha -> 422 com lista de erros) e
qualquer outra falha sobe para app.api.error_handlers.
"""
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query

from app.core.constants import ID_MAXIMO
from app.schemas.citacao import CitacaoCreate, CitacaoFiltro, CitacaoResponse, CitacaoUpdate
from app.services.citacao import CitacaoService, get_citacao_service

router = APIRouter(prefix="/citacao", tags=["Citacao"])

CitacaoId = Annotated[int, Path(gt=0, le=ID_MAXIMO, description="ID da citacao")]


@router.get("", response_model=List[CitacaoResponse])
async def listar_citacoes(
    filtro: Annotated[CitacaoFiltro, Query()],
    service: CitacaoService = Depends(get_citacao_service),
):
    """Lista citacoes, opcionalmente filtradas por titulo ou colecao."""
    return await service.listar(filtro)


@router.get("/{id}", response_model=CitacaoResponse)
async def buscar_citacao(
    id: CitacaoId,
    service: CitacaoService = Depends(get_citacao_service),
):
    return await service.buscar_por_id(id)


@router.post("", response_model=CitacaoResponse)
async def criar_citacao(
    dados: CitacaoCreate,
    service: CitacaoService = Depends(get_citacao_service),
):
    """Cria citacao numa colecao existente."""
    return await service.criar(dados)


@router.put("/{id}", response_model=CitacaoResponse)
async def atualizar_citacao(
    id: CitacaoId,
    dados: CitacaoUpdate,
    service: CitacaoService = Depends(get_citacao_service),
):
    return await service.atualizar(id, dados)


@router.delete("/{id}")
async def remover_citacao(
    id: CitacaoId,
    service: CitacaoService = Depends(get_citacao_service),
):
    await service.remover(id)
    return {"message": "Citacao removida com sucesso!"}
