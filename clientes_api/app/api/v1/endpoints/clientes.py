"""
Customer endpoints for API v1.

Registration validates the payload, delegates to ``ClienteService``
and translates its outcome into the documented responses: 201 with a
``Location`` header, 400 with a field error map or 409 when the email
is already registered.
"""

import logging
from typing import List

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from clientes_api.app.core.errors import (
    conflict_response,
    not_found_response,
    validation_error_response,
)
from clientes_api.app.schemas.cliente import (
    ClienteRequest,
    ClienteResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from clientes_api.app.services.cliente_service import ClienteService, DuplicateEmail
from clientes_api.app.services.validation import Invalid, validate_cliente


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ClienteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar cliente",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Dados inválidos"},
        status.HTTP_409_CONFLICT: {"model": MessageResponse, "description": "Email já cadastrado"},
    },
)
async def create_cliente(payload: ClienteRequest, request: Request) -> JSONResponse:
    """Cadastrar um novo cliente.

    O email é normalizado (trim + lowercase) antes de ser armazenado e
    deve ser único.
    """
    result = validate_cliente(payload.nome, payload.email)
    if isinstance(result, Invalid):
        logger.debug("Validation failed: %s", result.errors)
        return validation_error_response(result.errors)

    outcome = await ClienteService.create_cliente(result.nome, result.email)
    if isinstance(outcome, DuplicateEmail):
        return conflict_response()

    cliente = outcome.cliente
    location = request.url_for("get_cliente", cliente_id=cliente.id).path
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=cliente.model_dump(),
        headers={"Location": location},
    )


@router.get("", response_model=List[ClienteResponse], summary="Listar clientes")
async def list_clientes() -> List[ClienteResponse]:
    """Listar todos os clientes em ordem crescente de ID."""
    return await ClienteService.list_clientes()


@router.get(
    "/{cliente_id}",
    response_model=ClienteResponse,
    summary="Obter cliente",
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Cliente não encontrado"}},
)
async def get_cliente(cliente_id: int):
    """Obter um cliente pelo ID."""
    cliente = await ClienteService.get_cliente(cliente_id)
    if cliente is None:
        return not_found_response()
    return cliente
