"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from userposts.core.config import Settings
from userposts.core.database import Base, make_engine, make_session_factory
from userposts.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated in-memory database with sample data."""
    return Settings(database_url="sqlite://", seed_data=True, log_level="WARNING")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Client that runs the app lifespan (schema + seed)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Bare session over a fresh in-memory schema."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
