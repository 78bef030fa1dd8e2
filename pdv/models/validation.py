from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, Field, ConfigDict


class DocumentType(str, Enum):
    """Tipo de documento fiscal detectado pelo número de dígitos."""
    INDIVIDUAL = "INDIVIDUAL"  # CPF, 11 dígitos
    BUSINESS = "BUSINESS"      # CNPJ, 14 dígitos

    @property
    def label(self) -> str:
        return "CPF" if self is DocumentType.INDIVIDUAL else "CNPJ"


class FieldKind(str, Enum):
    """Tipos de validação aceitos pelos campos de formulário."""
    DOCUMENT = "document"
    PHONE = "phone"
    EMAIL = "email"
    CURRENCY = "currency"
    NUMBER = "number"
    REQUIRED = "required"


class FieldResult(BaseModel):
    """
    Resultado de uma validação de campo.
    `message` fica vazia quando o valor é válido.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str = Field(default="")

    def __bool__(self) -> bool:
        return self.is_valid


class DocumentResult(FieldResult):
    """Resultado da validação de CPF/CNPJ; aqui a mensagem também confirma o documento válido."""
    type: DocumentType | None = Field(default=None)
