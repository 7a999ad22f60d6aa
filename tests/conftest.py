# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every test gets its own SQLite file so ids start at 1 and no state leaks
# between tests.
# =============================================================================

import os

# Must happen before importing clientes_api, which reads settings at import.
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("DATABASE_URL", "test_clientes.db")

import pytest
from fastapi.testclient import TestClient

from clientes_api.app.core.config import settings
from clientes_api.app.core.db import init_db
from clientes_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated database file."""
    path = tmp_path / "clientes.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    """TestClient with startup events run against the temporary database."""
    with TestClient(app) as test_client:
        yield test_client
