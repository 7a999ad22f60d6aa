"""
Business logic for customers (``clientes``).

Creation is two-phase: an existence check on the normalized email
rejects the common duplicate cheaply, and the unique index on
``clientes.email`` rejects the rare case where a concurrent request
inserted the same address between the check and the insert.  Both
paths produce ``DuplicateEmail``.  No application-level locking is
used; the database constraint is the source of truth.

Any storage error that is not the email uniqueness violation is
propagated unmodified to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import List, Optional, Union

from clientes_api.app.core.db import get_connection
from clientes_api.app.core.logging_config import mask_email
from clientes_api.app.schemas.cliente import ClienteResponse


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Created:
    cliente: ClienteResponse


@dataclass(frozen=True)
class DuplicateEmail:
    email: str


CreateResult = Union[Created, DuplicateEmail]


# ---------------------------------------------------------------------------
# Storage boundary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Inserted:
    id: int


@dataclass(frozen=True)
class ConstraintViolation:
    """The insert was refused by the unique index on ``clientes.email``."""

    column: str = "email"


InsertResult = Union[Inserted, ConstraintViolation]


def is_email_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    """Tell the email uniqueness violation apart from other integrity errors.

    NOT NULL, CHECK and trigger failures are also ``IntegrityError`` and
    must not be reported as duplicates.  The extended error code (Python
    3.11+) identifies a UNIQUE failure; the message names the column.
    """
    errorname = getattr(exc, "sqlite_errorname", None)
    if errorname is not None and errorname != "SQLITE_CONSTRAINT_UNIQUE":
        return False
    message = str(exc)
    return message.startswith("UNIQUE constraint failed") and "clientes.email" in message


def email_exists(cursor: sqlite3.Cursor, email: str) -> bool:
    row = cursor.execute(
        "SELECT 1 FROM clientes WHERE email = ? LIMIT 1",
        (email,),
    ).fetchone()
    return row is not None


def insert_cliente(conn: sqlite3.Connection, nome: str, email: str) -> InsertResult:
    """Insert a customer and commit.

    Returns ``Inserted`` with the id assigned by SQLite or
    ``ConstraintViolation`` if the email is already taken.  Every other
    error is rolled back and re-raised.
    """
    try:
        cursor = conn.execute(
            "INSERT INTO clientes (nome, email) VALUES (?, ?)",
            (nome, email),
        )
        conn.commit()
    except sqlite3.IntegrityError as exc:
        conn.rollback()
        if is_email_unique_violation(exc):
            return ConstraintViolation()
        raise
    except sqlite3.Error:
        conn.rollback()
        raise
    return Inserted(id=cursor.lastrowid)


def _row_to_cliente(row: sqlite3.Row) -> ClienteResponse:
    return ClienteResponse(id=row["id"], nome=row["nome"], email=row["email"])


class ClienteService:
    """Customer record store backed by the ``clientes`` table."""

    @classmethod
    async def create_cliente(cls, nome: str, email: str) -> CreateResult:
        """Create a customer from already validated values.

        ``nome`` must be trimmed and ``email`` normalized (see
        ``services.validation``); the email is compared byte for byte.
        """
        conn = get_connection()
        try:
            if email_exists(conn.cursor(), email):
                logger.info("Rejected duplicate email %s", mask_email(email))
                return DuplicateEmail(email=email)

            result = insert_cliente(conn, nome, email)
            if isinstance(result, ConstraintViolation):
                logger.info("Rejected duplicate email %s (concurrent insert)", mask_email(email))
                return DuplicateEmail(email=email)

            logger.info("Created cliente %s", result.id)
            return Created(cliente=ClienteResponse(id=result.id, nome=nome, email=email))
        finally:
            conn.close()

    @classmethod
    async def list_clientes(cls) -> List[ClienteResponse]:
        """Return all customers ordered by ascending id."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, nome, email FROM clientes ORDER BY id ASC"
            ).fetchall()
            return [_row_to_cliente(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_cliente(cls, cliente_id: int) -> Optional[ClienteResponse]:
        """Retrieve a customer by id."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, nome, email FROM clientes WHERE id = ?",
                (cliente_id,),
            ).fetchone()
            if row is None:
                return None
            return _row_to_cliente(row)
        finally:
            conn.close()
