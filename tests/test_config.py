import os

import pytest

from app.core.config import Settings, load_env_file


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("ADMIN_SECRET_KEY", "op")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings.from_env()

    assert settings.ADMIN_SECRET_KEY == "op"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.ADMIN_SECRET_KEY = "changed"


def test_production_rejects_default_secrets():
    settings = Settings(ENVIRONMENT="production", DATABASE_URL="postgresql://u:x@db.internal/catalog")

    with pytest.raises(ValueError):
        settings.validate()


def test_development_only_warns_on_defaults():
    with pytest.warns(UserWarning):
        Settings().validate()


def test_production_accepts_real_secrets():
    Settings(
        ENVIRONMENT="prod",
        DATABASE_URL="postgresql://u:x@db.internal/catalog",
        JWT_ACCESS_TOKEN_SECRET_KEY="jwt",
        ADMIN_SECRET_KEY="admin",
    ).validate()


def test_env_file_fills_missing_variables_only(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("CATALOG_FROM_FILE=file\nADMIN_SECRET_KEY=file-secret\n")
    monkeypatch.setenv("CATALOG_FROM_FILE", "placeholder")
    monkeypatch.delenv("CATALOG_FROM_FILE")
    monkeypatch.setenv("ADMIN_SECRET_KEY", "process-secret")

    assert load_env_file(env_file) is True

    assert os.environ["CATALOG_FROM_FILE"] == "file"
    assert os.environ["ADMIN_SECRET_KEY"] == "process-secret"


def test_missing_env_file_is_skipped(tmp_path):
    assert load_env_file(tmp_path / ".env") is False
