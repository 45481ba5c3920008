"""
backend/tests/conftest.py

Purpose:
    Shared pytest fixtures: an in-memory SQLite store with foreign keys
    enforced, a session bound to it, and a TestClient wired to the same store.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

_BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from rosterapi.crud.crud_player import PlayerRepository  # noqa: E402
from rosterapi.crud.crud_team import TeamRepository  # noqa: E402
from rosterapi.db.init_db import init_db  # noqa: E402
from rosterapi.db.session import enable_sqlite_foreign_keys, get_db  # noqa: E402
from rosterapi.main import app  # noqa: E402


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def team_repo(db):
    return TeamRepository(db)


@pytest.fixture()
def player_repo(db):
    return PlayerRepository(db)


@pytest.fixture()
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
