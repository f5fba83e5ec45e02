import pytest

from src.core.exceptions import ConfigurationError
from src.core.settings import AppSettings
from src.db.config import Settings


@pytest.fixture
def no_database_env(monkeypatch):
    for key in ("DATABASE_URL", "POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB", "POSTGRES_HOST", "POSTGRES_PORT"):
        monkeypatch.delenv(key, raising=False)


def test_legacy_postgres_scheme_is_normalized(no_database_env):
    settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@db:5432/docs")

    assert settings.database_url == "postgresql://u:p@db:5432/docs"
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/docs"
    assert settings.sync_database_url == "postgresql://u:p@db:5432/docs"


def test_sqlite_url_gets_async_driver(no_database_env):
    settings = Settings(_env_file=None, DATABASE_URL="sqlite:///./docs.db")

    assert settings.is_sqlite
    assert settings.async_database_url == "sqlite+aiosqlite:///./docs.db"
    assert Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite:///x.db").sync_database_url == "sqlite:///x.db"


def test_url_is_assembled_from_postgres_parts(no_database_env):
    settings = Settings(
        _env_file=None,
        POSTGRES_USER="docs",
        POSTGRES_PASSWORD="secret",
        POSTGRES_DB="docsgen",
        POSTGRES_HOST="db",
        POSTGRES_PORT=6543,
    )

    assert settings.async_database_url == "postgresql+asyncpg://docs:secret@db:6543/docsgen"


def test_missing_database_configuration(no_database_env):
    with pytest.raises(ConfigurationError) as excinfo:
        Settings(_env_file=None).database_url

    assert excinfo.value.key == "DATABASE_URL"
    assert "DATABASE_URL" in str(excinfo.value)


def test_require_names_the_first_missing_setting():
    settings = AppSettings(_env_file=None, JWT_SECRET="s", ADMIN_PASSWORD_HASH="")

    settings.require("JWT_SECRET")
    with pytest.raises(ConfigurationError) as excinfo:
        settings.require("JWT_SECRET", "ADMIN_PASSWORD_HASH")
    assert excinfo.value.key == "ADMIN_PASSWORD_HASH"


def test_cors_origins_accept_comma_separated_values(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://docs.example.edu")

    settings = AppSettings(_env_file=None)

    assert settings.CORS_ORIGINS == ["http://localhost:3000", "https://docs.example.edu"]


def test_cors_origins_default_to_any(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    assert AppSettings(_env_file=None).CORS_ORIGINS == ["*"]


def test_cors_origins_accept_json_array(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://docs.example.edu"]')

    assert AppSettings(_env_file=None).CORS_ORIGINS == ["https://docs.example.edu"]
