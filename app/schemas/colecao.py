"""
Schemas de entrada e saida para Colecao.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional

from app.core.config import settings


class ColecaoCreate(BaseModel):
    """Payload de criacao de colecao."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    titulo: str = Field(..., min_length=1, max_length=255)
    descricao: Optional[str] = Field(None, max_length=2000)


class ColecaoUpdate(BaseModel):
    """Payload de atualizacao parcial. Ao menos um campo."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    titulo: Optional[str] = Field(None, min_length=1, max_length=255)
    descricao: Optional[str] = Field(None, max_length=2000)

    @model_validator(mode="after")
    def verificar_campos(self):
        if not self.model_fields_set:
            raise ValueError("Informe ao menos um campo para atualizar")
        if "titulo" in self.model_fields_set and self.titulo is None:
            raise ValueError("titulo nao pode ser nulo")
        return self


class ColecaoFiltro(BaseModel):
    """Query params de GET /colecao. `?titulo=` vazio equivale a sem filtro."""

    titulo: Optional[str] = Field(None, min_length=1, max_length=255)
    limit: int = Field(settings.MAX_RESULTS_DEFAULT, ge=1, le=settings.MAX_RESULTS_ABSOLUTE)
    offset: int = Field(0, ge=0)

    @field_validator("titulo", mode="before")
    @classmethod
    def titulo_vazio_sem_filtro(cls, valor):
        if isinstance(valor, str):
            return valor.strip() or None
        return valor


class ColecaoResponse(BaseModel):
    """Colecao como devolvida pela API."""

    id: int
    titulo: str
    descricao: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
