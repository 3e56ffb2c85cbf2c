"""Shared fixtures.

The API runs against an in-memory SQLite database that replaces the
``get_db`` dependency; ``sample_client`` runs with no database configured.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mvc_portfolio import config
from mvc_portfolio.app import app
from mvc_portfolio.core.database import get_db
from mvc_portfolio.models import Base
from mvc_portfolio.utils.auth import create_token


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
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_client(monkeypatch):
    monkeypatch.setattr(config, "DATABASE_URL", "")
    app.dependency_overrides.clear()
    yield TestClient(app)


@pytest.fixture
def admin_token():
    return create_token("1")


@pytest.fixture
def user_token():
    return create_token("2")
