"""Shared fixtures: a throwaway SQLite file and fresh in-memory auth state per test."""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from friterie.core.config import settings
from friterie.db import session as db_session
from friterie.db.base import Base
from friterie.main import app
from friterie.services.password_reset import ResetTokenStore
from friterie.services.rate_limit import RateLimiter
from friterie.services.session_store import SessionStore
from friterie.services.status_service import StatusStore

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "changeme123"


class FakeClock:
    """Deterministic clock for expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Engine]:
    test_engine = db_session.build_engine(f"sqlite:///{tmp_path / 'menu.db'}")
    testing_session_local = sessionmaker(bind=test_engine, autoflush=False, autocommit=False)
    monkeypatch.setattr(db_session, "engine", test_engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db(engine: Engine) -> Iterator[Session]:
    with db_session.SessionLocal() as session:
        yield session


@pytest.fixture(autouse=True)
def fresh_app_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "sweeper_enabled", False)
    monkeypatch.setattr(settings, "seed_menu", False)
    monkeypatch.setattr(app.state, "sessions", SessionStore())
    monkeypatch.setattr(app.state, "reset_tokens", ResetTokenStore())
    monkeypatch.setattr(app.state, "rate_limiter", RateLimiter())
    monkeypatch.setattr(app.state, "status_store", StatusStore(tmp_path / "status.json"))


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    response = client.post("/api/v1/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
