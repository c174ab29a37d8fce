import pytest

from app.config import SQLITE_FALLBACK_URL, get_settings

ENV_NAMES = ["DATABASE_URL", "DB_HOST", "DB_PORT", "DB_USER", "DB_PASS", "DB_NAME", "DB_POOL_SIZE", "PORT", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_fall_back_to_sqlite():
    settings = get_settings()
    assert settings.database_url == SQLITE_FALLBACK_URL
    assert settings.port == 3000
    assert settings.pool_size == 5


def test_postgres_url_from_parts(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_USER", "ann")
    monkeypatch.setenv("DB_PASS", "secret")
    monkeypatch.setenv("DB_NAME", "taskboard")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.database_url == "postgresql+asyncpg://ann:secret@db:5432/taskboard"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_database_url_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./other.db")
    monkeypatch.setenv("DB_HOST", "db")
    assert get_settings().database_url == "sqlite+aiosqlite:///./other.db"
