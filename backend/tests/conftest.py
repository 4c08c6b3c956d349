"""
Basic test configuration and fixtures.
"""

import os

# The app module builds its engine at import time; keep it off PostgreSQL.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from medivault.core.config import Settings
from medivault.core.database import build_engine, get_db
from medivault.core.dependencies import get_settings_dependency
from medivault.main import app as main_app
from medivault.models import Base
from medivault.services.auth_service import AuthService

SAMPLE_PDF = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway database and upload directory."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'medivault-test.db'}",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def session_factory(settings):
    engine = build_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    """Database session for arranging and inspecting test data."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory, settings):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    main_app.dependency_overrides[get_db] = override_get_db
    main_app.dependency_overrides[get_settings_dependency] = lambda: settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Unauthenticated test client."""
    return TestClient(app)


@pytest.fixture
def login(app, db, settings):
    """Factory: open a session for ``user_id`` and return a client carrying it."""

    def _login(user_id: str = "user-a", **claims) -> TestClient:
        claims.setdefault("email", f"{user_id}@example.com")
        claims.setdefault("first_name", user_id.title())
        sid = AuthService(db, settings).establish_session({"sub": user_id, **claims})
        authed = TestClient(app)
        authed.headers["Cookie"] = f"{settings.session_cookie_name}={sid}"
        return authed

    return _login


@pytest.fixture
def auth_client(login):
    """Client logged in as user-a."""
    return login("user-a")


def upload_document(client: TestClient, content: bytes = SAMPLE_PDF, **fields):
    """POST /api/documents with sensible defaults for every required field."""
    filename = fields.pop("filename", "sample.pdf")
    mime_type = fields.pop("mime_type", "application/pdf")
    data = {
        "title": "Blood Panel",
        "documentType": "lab_result",
        "documentDate": "2024-01-10",
    }
    data.update(fields)
    data = {k: v for k, v in data.items() if v is not None}
    return client.post(
        "/api/documents",
        data=data,
        files={"file": (filename, content, mime_type)},
    )


@pytest.fixture
def upload():
    return upload_document
