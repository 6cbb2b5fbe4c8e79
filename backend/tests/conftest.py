"""Shared test fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import guest_portal.database as db_module
from guest_portal.config import settings
from guest_portal.database import get_db, init_db
from guest_portal.limiter import limiter
from guest_portal.main import app
from guest_portal.models import Location


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created.

    StaticPool ensures every session uses the same connection,
    so the in-memory database is shared across the test.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    return eng


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    s = TestingSession()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def make_location(db):
    """Factory for Location rows; defaults mirror the admin dashboard."""

    def _make(**overrides) -> Location:
        values = {
            "name": "Lobby",
            "ssid": "Guest-WiFi",
            "nas_ip": "10.0.0.2",
            "session_timeout": 3600,
            "idle_timeout": 600,
            "bandwidth_limit_up": 0,
            "bandwidth_limit_down": 0,
            "redirect_url": "https://example.com/welcome",
        }
        values.update(overrides)
        location = Location(**values)
        db.add(location)
        db.commit()
        db.refresh(location)
        return location

    return _make


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with overridden DB engine and session."""
    original_engine = db_module.engine
    db_module.engine = engine
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_db() -> Generator[Session, None, None]:
        s = TestingSession()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _override_db
    limiter.enabled = False
    with TestClient(app) as c:
        yield c
    limiter.enabled = True
    app.dependency_overrides.clear()
    db_module.engine = original_engine


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = jwt.encode({"sub": "ops@example.com", "role": "admin"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return {"Authorization": f"Bearer {token}"}
