# tests/conftest.py
# Общие фикстуры: SQLite в памяти, временный каталог загрузок, тестовые секреты.
import os
import tempfile

# До импорта app: каталог статики монтируется при создании приложения
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="catalog-uploads-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.security import get_db
from app.db.base import Base
from app.main import app

ADMIN_SECRET = "operator-secret"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def settings(tmp_path):
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_ACCESS_TOKEN_SECRET_KEY="test-jwt-secret",
        ADMIN_SECRET_KEY=ADMIN_SECRET,
        UPLOAD_DIR=str(upload_dir),
    )


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(settings, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_admin(client, username="admin", password="s3cret-pass", secret=ADMIN_SECRET):
    return client.post(
        "/auth/register/admin",
        json={"secretKey": secret, "username": username, "password": password},
    )


def login_admin(client, username="admin", password="s3cret-pass"):
    return client.post("/auth/login/admin", json={"username": username, "password": password})


@pytest.fixture
def auth_headers(client):
    assert register_admin(client).status_code == 201
    token = login_admin(client).json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_product(client, auth_headers):
    def _create(title="Tea", description="Green tea", amount="10", filename="tea.png"):
        response = client.post(
            "/admin/api/v1/product/create",
            data={"title": title, "description": description, "amount": amount},
            files={"image": (filename, PNG_BYTES, "image/png")},
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
