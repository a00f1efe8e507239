# tests/conftest.py

from __future__ import annotations

import os

# keep the module-level engine off disk; must happen before tasklist is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from tasklist.db.session import get_session, init_db, make_engine
from tasklist.main import app


@pytest.fixture()
def engine():
    """Fresh in-memory store per test, schema created and seeded through init_db."""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine) -> Session:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine) -> TestClient:
    def _get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
