"""
Endpoints CRUD de colecoes.
"""
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query

from app.core.constants import ID_MAXIMO
from app.schemas.colecao import ColecaoCreate, ColecaoFiltro, ColecaoResponse, ColecaoUpdate
from app.services.colecao import ColecaoService, get_colecao_service

router = APIRouter(prefix="/colecao", tags=["Colecao"])

ColecaoId = Annotated[int, Path(gt=0, le=ID_MAXIMO, description="ID da colecao")]


@router.get("", response_model=List[ColecaoResponse])
async def listar_colecoes(
    filtro: Annotated[ColecaoFiltro, Query()],
    service: ColecaoService = Depends(get_colecao_service),
):
    """Lista colecoes, opcionalmente filtradas por titulo."""
    return await service.listar(filtro)


@router.get("/{id}", response_model=ColecaoResponse)
async def buscar_colecao(
    id: ColecaoId,
    service: ColecaoService = Depends(get_colecao_service),
):
    return await service.buscar_por_id(id)


@router.post("", response_model=ColecaoResponse)
async def criar_colecao(
    dados: ColecaoCreate,
    service: ColecaoService = Depends(get_colecao_service),
):
    return await service.criar(dados)


@router.put("/{id}", response_model=ColecaoResponse)
async def atualizar_colecao(
    id: ColecaoId,
    dados: ColecaoUpdate,
    service: ColecaoService = Depends(get_colecao_service),
):
    return await service.atualizar(id, dados)


@router.delete("/{id}")
async def remover_colecao(
    id: ColecaoId,
    service: ColecaoService = Depends(get_colecao_service),
):
    """Remove colecao. Colecao com citacoes retorna 409."""
    await service.remover(id)
    return {"message": "Colecao removida com sucesso!"}
