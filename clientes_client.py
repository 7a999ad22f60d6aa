"""Customer API client.

A thin wrapper around the HTTP API exposed by ``clientes_api``.  It uses
the ``requests`` library and never raises for HTTP or transport
failures; every method returns a ``(data, error)`` tuple instead:

* :meth:`create_cliente` – register a customer.
* :meth:`list_clientes` – return all customers ordered by id.
* :meth:`get_cliente` – fetch a single customer by id.

On failure ``data`` is ``None`` (or an empty list) and ``error`` is a
dictionary with the keys ``status_code``, ``message`` and ``errors``.
``errors`` carries the field error map of a 400 response and is empty
otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class ClientesAPI:
    """Client for the customer registration API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any route prefix,
                e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            errors: Dict[str, List[str]] = {}
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or str(err_json)
                    errors = err_json.get("errors") or {}
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message, "errors": errors}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": {}}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def create_cliente(self, nome: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Register a customer.

        Returns:
            A tuple ``(cliente, error)``.  A duplicate email yields an
            error with ``status_code`` 409.
        """
        return self._request("POST", "/clientes", json_body={"nome": nome, "email": email})

    def list_clientes(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/clientes")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_cliente(self, cliente_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._request("GET", f"/clientes/{cliente_id}")
