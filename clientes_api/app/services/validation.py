"""
Validation of customer creation requests.

``validate_cliente`` checks every field independently and returns
either ``Valid`` with the cleaned values or ``Invalid`` with a mapping
from field name to error messages.  It never raises for bad input and
has no side effects.

Email shape is checked with ``email-validator`` (the library behind
pydantic's ``EmailStr``) with DNS lookups disabled.  It requires a
local part, a single ``@`` and a domain containing at least one dot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from email_validator import EmailNotValidError, validate_email


MAX_LENGTH = 200

NOME_OBRIGATORIO = "Nome é obrigatório."
NOME_MUITO_LONGO = f"Nome deve ter no máximo {MAX_LENGTH} caracteres."
EMAIL_OBRIGATORIO = "Email é obrigatório."
EMAIL_MUITO_LONGO = f"Email deve ter no máximo {MAX_LENGTH} caracteres."
EMAIL_INVALIDO = "Email inválido."


@dataclass(frozen=True)
class Valid:
    """Cleaned values ready to be stored."""

    nome: str
    email: str


@dataclass(frozen=True)
class Invalid:
    """Field error map: field name -> ordered list of messages."""

    errors: Dict[str, List[str]] = field(default_factory=dict)


ValidationResult = Union[Valid, Invalid]


def normalize_email(email: str) -> str:
    """Canonical form used for storage and uniqueness comparison."""
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_cliente(raw_nome: Optional[str], raw_email: Optional[str]) -> ValidationResult:
    """Validate raw ``nome`` and ``email`` values.

    All rules are evaluated; errors accumulate instead of stopping at the
    first failure.  ``None`` is treated as an empty string.  Each field
    reports at most one message: for ``email`` the "required" and
    "invalid" causes are mutually exclusive.
    """
    nome = (raw_nome or "").strip()
    # Limits apply to the stored form; lower() can lengthen a string
    # ("İ" becomes two code points).
    email = normalize_email(raw_email or "")
    errors: Dict[str, List[str]] = {}

    if not nome:
        errors.setdefault("nome", []).append(NOME_OBRIGATORIO)
    elif len(nome) > MAX_LENGTH:
        errors.setdefault("nome", []).append(NOME_MUITO_LONGO)

    if not email:
        errors.setdefault("email", []).append(EMAIL_OBRIGATORIO)
    elif len(email) > MAX_LENGTH:
        errors.setdefault("email", []).append(EMAIL_MUITO_LONGO)
    elif not is_valid_email(email):
        errors.setdefault("email", []).append(EMAIL_INVALIDO)

    if errors:
        return Invalid(errors=errors)
    return Valid(nome=nome, email=email)
