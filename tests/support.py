"""Shared builders for tests: settings, an in-memory database and an app client."""

from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from gamestore.core.config import Settings
from gamestore.core.database import create_db_engine, create_session_factory
from gamestore.main import create_app
from gamestore.models import Base

TEST_SECRET = "test-secret-not-for-production"


def make_settings(**overrides: Any) -> Settings:
    """Settings for an in-memory SQLite database with a cheap bcrypt cost."""
    values: dict[str, Any] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_session() -> Session:
    """Fresh in-memory database with all tables created."""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(engine)
    return create_session_factory(engine)()


def make_client(**overrides: Any) -> TestClient:
    app = create_app(make_settings(**overrides))
    Base.metadata.create_all(app.state.engine)
    return TestClient(app)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
