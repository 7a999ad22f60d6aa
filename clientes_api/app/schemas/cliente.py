"""
Pydantic models for customer (``cliente``) payloads.

The request model deliberately accepts any string, or nothing at all,
for both fields: presence and shape are checked by the validator in
``services.validation`` so that every problem is reported in the same
``{"message", "errors"}`` format.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ClienteRequest(BaseModel):
    """Dados para cadastro de cliente."""

    nome: Optional[str] = Field(None, description="Nome do cliente", examples=["Carlos Silva"])
    email: Optional[str] = Field(
        None,
        description="Email do cliente (deve ser único)",
        examples=["carlos@email.com"],
    )


class ClienteResponse(BaseModel):
    """Dados do cliente retornado pela API."""

    id: int = Field(..., description="ID único do cliente", examples=[1])
    nome: str = Field(..., description="Nome do cliente", examples=["Carlos Silva"])
    email: str = Field(
        ...,
        description="Email do cliente (normalizado em lowercase)",
        examples=["carlos@email.com"],
    )

    model_config = {
        "from_attributes": True,
    }


class ValidationErrorResponse(BaseModel):
    """Resposta de erro de validação (400 Bad Request)."""

    message: str = Field("Validation failed", examples=["Validation failed"])
    errors: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Dicionário com erros por campo",
        examples=[{"email": ["Email inválido."]}],
    )


class MessageResponse(BaseModel):
    """Resposta com uma única mensagem (409 Conflict, 404 Not Found)."""

    message: str = Field(..., examples=["Email já cadastrado."])
