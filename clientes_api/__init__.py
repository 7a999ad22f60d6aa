"""
Top‑level package for the customer registration API.

All functionality lives in submodules under ``app``; the ASGI
application is ``clientes_api.app.main:app``.
"""

__all__ = []
