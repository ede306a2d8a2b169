"""
Schemas de entrada e saida para Citacao.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional

from app.core.config import settings
from app.core.constants import ID_MAXIMO


class CitacaoCreate(BaseModel):
    """Payload de criacao de citacao."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    titulo: str = Field(..., min_length=1, max_length=255)
    colecao_id: int = Field(..., gt=0, le=ID_MAXIMO, description="Colecao a que a citacao pertence")
    texto: Optional[str] = Field(None, max_length=5000)
    autor: Optional[str] = Field(None, max_length=255)
    referencia: Optional[str] = Field(None, max_length=500, description="Fonte da citacao")


class CitacaoUpdate(BaseModel):
    """Payload de atualizacao parcial. Ao menos um campo."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    titulo: Optional[str] = Field(None, min_length=1, max_length=255)
    colecao_id: Optional[int] = Field(None, gt=0, le=ID_MAXIMO)
    texto: Optional[str] = Field(None, max_length=5000)
    autor: Optional[str] = Field(None, max_length=255)
    referencia: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def verificar_campos(self):
        if not self.model_fields_set:
            raise ValueError("Informe ao menos um campo para atualizar")
        # Campos obrigatorios na entidade nao podem ser zerados
        for campo in ("titulo", "colecao_id"):
            if campo in self.model_fields_set and getattr(self, campo) is None:
                raise ValueError(f"{campo} nao pode ser nulo")
        return self


class CitacaoFiltro(BaseModel):
    """Query params de GET /citacao. `?titulo=` vazio equivale a sem filtro."""

    titulo: Optional[str] = Field(None, min_length=1, max_length=255)
    colecao_id: Optional[int] = Field(None, gt=0, le=ID_MAXIMO)
    limit: int = Field(settings.MAX_RESULTS_DEFAULT, ge=1, le=settings.MAX_RESULTS_ABSOLUTE)
    offset: int = Field(0, ge=0)

    @field_validator("titulo", mode="before")
    @classmethod
    def titulo_vazio_sem_filtro(cls, valor):
        if isinstance(valor, str):
            return valor.strip() or None
        return valor


class CitacaoResponse(BaseModel):
    """Citacao como devolvida pela API."""

    id: int
    titulo: str
    colecao_id: int
    texto: Optional[str] = None
    autor: Optional[str] = None
    referencia: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
