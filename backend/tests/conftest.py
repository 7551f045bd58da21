"""Pytest fixtures — fresh SQLite database and empty RSVP cache per test."""
import os

# Keep the app's own engine off the dev database during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from rsvp_service.database import Base, get_db
from rsvp_service.main import app
from rsvp_service.services.rsvp_cache import rsvp_cache

# Import all models so they register with Base.metadata
from rsvp_service.models.rsvp import RSVP  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _empty_cache():
    """Ids restart at 1 with every fresh database, so the cache must too."""
    rsvp_cache.clear()
    yield
    rsvp_cache.clear()


# ---------------------------------------------------------------------------
# Helper: create an RSVP via the API, returns the JSON response dict
# ---------------------------------------------------------------------------
def create_test_rsvp(client: TestClient, name: str = "John Doe", attending: int = 2) -> dict:
    """Helper — POST /rsvps and return response JSON."""
    resp = client.post("/rsvps", json={
        "guestName": name,
        "totalAttending": attending,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()
