"""Shared fixtures: an in-memory SQLite database and FastAPI test clients."""
import os
from unittest.mock import MagicMock

# Must be set before tasknote.db builds its module-level engine.
os.environ.setdefault("TASKNOTE_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tasknote.api.deps import get_task_note_repository
from tasknote.api.main import app
from tasknote.db import Base, get_db
from tasknote.repository import TaskNoteRepository


@pytest.fixture
def engine():
    """One shared in-memory connection so every session sees the same data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session):
    return TaskNoteRepository(db_session)


@pytest.fixture
def client(session_factory):
    """TestClient whose requests run against the in-memory database."""

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def mock_repo():
    return MagicMock(spec=TaskNoteRepository)


@pytest.fixture
def mock_client(mock_repo):
    """TestClient whose handlers talk to a mocked repository."""
    app.dependency_overrides[get_task_note_repository] = lambda: mock_repo
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
