"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.factories import NOW
from tests.test_constants import (
    TEST_CREW_EMAIL,
    TEST_CRON_SECRET,
    TEST_OWNER_EMAIL,
    TEST_PASSWORD,
    TEST_SECRET_KEY,
    TEST_STRANGER_EMAIL,
)

# Force an in-memory test DB; don't inherit from .env (avoids touching captainslog_dev)
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ALERT_TIMEZONE"] = "UTC"
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)
os.environ["CRON_SECRET"] = TEST_CRON_SECRET
os.environ["SMTP_HOST"] = ""


@pytest.fixture
def db() -> Session:
    """Database session on a fresh schema. Tables are dropped after each test."""
    import captainslog.models  # noqa: F401
    from captainslog.db.session import Base, SessionLocal, engine

    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from captainslog.main import app

    return TestClient(app)


@pytest.fixture
def client_with_db(db: Session) -> TestClient:
    """TestClient with get_db overridden to the test session and the clock pinned to NOW."""
    from captainslog.api.deps import get_now
    from captainslog.db.session import get_db
    from captainslog.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: NOW
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_now, None)


# ── Fleet fixtures ─────────────────────────────────────────────────


def _make_user(db: Session, email: str, name: str = ""):
    from captainslog.services.auth import create_user

    return create_user(db, email, TEST_PASSWORD, name=name)


@pytest.fixture
def owner(db: Session):
    return _make_user(db, TEST_OWNER_EMAIL, "Owner")


@pytest.fixture
def crew_user(db: Session):
    return _make_user(db, TEST_CREW_EMAIL, "Crew")


@pytest.fixture
def stranger(db: Session):
    return _make_user(db, TEST_STRANGER_EMAIL, "Stranger")


@pytest.fixture
def boat(db: Session, owner):
    from captainslog.models import Boat

    b = Boat(owner_id=owner.id, name="Sea Breeze", make="Beneteau", home_port="Dubai Marina")
    db.add(b)
    db.commit()
    db.refresh(b)
    return b

