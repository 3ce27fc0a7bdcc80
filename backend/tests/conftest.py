import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import init_db, make_session_factory  # noqa: E402
from services.registry import StoreRegistry  # noqa: E402


@pytest.fixture
def engine():
    """Fresh in-memory database shared by every connection of one test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def registry(session_factory):
    return StoreRegistry(session_factory)


@pytest.fixture
def client(registry):
    from fastapi.testclient import TestClient

    from api.main import app
    from api.routes import books as books_router

    app.dependency_overrides[books_router.get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
