"""
Application package initializer.

The API is organised into ``core`` (configuration, database, logging,
error handling), ``schemas``, ``services`` and versioned routers under
``api/<version>/``.
"""

from .main import app  # noqa: F401
