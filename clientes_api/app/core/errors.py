"""
Error responses and exception handlers.

Validation failures and duplicate emails are expected outcomes and are
turned into responses by the endpoints themselves.  The handlers here
cover what reaches the framework: malformed request bodies, which are
reported in the same 400 format as field validation, and storage
faults, which are logged and surfaced as 500.
"""

import logging
import sqlite3
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
EMAIL_JA_CADASTRADO = "Email já cadastrado."
CLIENTE_NAO_ENCONTRADO = "Cliente não encontrado."
ERRO_DE_ARMAZENAMENTO = "Erro interno ao acessar o armazenamento."


def validation_error_response(errors: Dict[str, List[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_FAILED, "errors": errors},
    )


def conflict_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": EMAIL_JA_CADASTRADO},
    )


def not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": CLIENTE_NAO_ENCONTRADO},
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report body parsing errors keyed by field name.

    FastAPI locations look like ``("body", "nome")``; the last string
    element is used as the key, falling back to ``"body"`` when the
    payload as a whole is unusable (e.g. invalid JSON).
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if isinstance(part, str)]
        key = loc[-1] if loc else "body"
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    logger.debug("Rejected malformed request to %s: %s", request.url.path, errors)
    return validation_error_response(errors)


async def storage_fault_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.exception("Storage failure while handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": ERRO_DE_ARMAZENAMENTO},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(sqlite3.Error, storage_fault_handler)
