"""Shared fixtures: an isolated SQLite database, users and an API client."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"projecthub-test-{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["DEFAULT_ACTIVITY_ROLE"] = "client"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from projecthub.domain.entities import User  # noqa: E402
from projecthub.infrastructure import models  # noqa: E402,F401
from projecthub.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from projecthub.infrastructure.repositories import UserRepository  # noqa: E402
from projecthub.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Give every test empty tables."""

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session: Session):
    """Factory creating persisted users with unique emails."""

    counter = {"value": 0}

    def _make_user(name: str = "Alice", role: str | None = "developer", **kwargs) -> User:
        counter["value"] += 1
        email = kwargs.pop("email", f"{name.lower()}{counter['value']}@example.com")
        return UserRepository(session).create(
            User(id=None, name=name, email=email, role=role, **kwargs)
        )

    return _make_user


@pytest.fixture()
def auth_headers():
    """Build bearer authentication headers for a user."""

    def _auth_headers(user: User) -> dict[str, str]:
        token = create_access_token({"sub": user.email})
        return {"Authorization": f"Bearer {token}", "User-Agent": "pytest-agent"}

    return _auth_headers


@pytest.fixture()
def client() -> Iterator[TestClient]:
    from projecthub.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def pytest_sessionfinish(session, exitstatus):  # noqa: ARG001
    engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
