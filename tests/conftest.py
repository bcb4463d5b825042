"""Shared fixtures: a throwaway SQLite database and authenticated clients."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "synergysphere_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from synergysphere.config import get_settings  # noqa: E402

get_settings.cache_clear()

from synergysphere.application.use_cases.users import create_user  # noqa: E402
from synergysphere.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from synergysphere.infrastructure.security import create_user_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Return a factory registering users the way the identity mirror does."""

    def _make_user(email: str, display_name: str | None = None):
        return create_user(session, email=email, display_name=display_name)

    return _make_user


@pytest.fixture()
def auth_headers():
    def _auth_headers(user) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_user_token(user.id, user.email)}"}

    return _auth_headers


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
