"""
Shared fixtures: in-memory SQLite database and a recording cache client.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import create_app
from app.utils.cache import get_cache_client
from app.utils.db import Base, get_db


class FakeCache:
    """Stands in for the Redis client; records deleted keys."""

    def __init__(self):
        self.deleted = []

    def delete(self, key):
        self.deleted.append(key)
        return 1


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
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
def cache():
    return FakeCache()


@pytest.fixture
def client(session_factory, cache):
    """Create a test client wired to the in-memory database."""
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    def override_get_cache_client():
        yield cache

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache_client] = override_get_cache_client
    return TestClient(app)
