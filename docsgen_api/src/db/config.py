from __future__ import annotations

import re
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Where the database lives.

    DATABASE_URL wins when set. It may use the postgres://, postgresql:// or
    sqlite:// scheme, with or without a driver. Otherwise the URL is built from
    POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_DB, POSTGRES_HOST and POSTGRES_PORT.
    """

    DATABASE_URL: Optional[str] = Field(
        default=None, description="Full database URL; overrides the POSTGRES_* parts."
    )
    POSTGRES_USER: Optional[str] = Field(default=None)
    POSTGRES_PASSWORD: Optional[str] = Field(default=None)
    POSTGRES_DB: Optional[str] = Field(default=None)
    POSTGRES_HOST: Optional[str] = Field(default="localhost")
    POSTGRES_PORT: Optional[int] = Field(default=5432)

    SQL_ECHO: bool = Field(default=False, description="Log every SQL statement")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """
        The configured URL with the legacy postgres:// scheme normalized.

        Raises:
            ConfigurationError: neither DATABASE_URL nor the POSTGRES_* credentials are set.
        """
        if self.DATABASE_URL:
            return re.sub(r"^postgres://", "postgresql://", self.DATABASE_URL)

        if not (self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_DB):
            raise ConfigurationError("DATABASE_URL")
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST or 'localhost'}:{self.POSTGRES_PORT or 5432}/{self.POSTGRES_DB}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """The URL with the asyncio driver: aiosqlite for SQLite, asyncpg otherwise."""
        if self.is_sqlite:
            return re.sub(r"^sqlite(\+\w+)?://", "sqlite+aiosqlite://", self.database_url)
        return re.sub(r"^postgresql(\+\w+)?://", "postgresql+asyncpg://", self.database_url)

    @property
    def sync_database_url(self) -> str:
        """The URL without a driver, as stored in the Alembic config."""
        return re.sub(r"^(postgresql|sqlite)\+\w+://", r"\1://", self.database_url)


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Read database settings from the environment; a fresh instance per call."""
    return Settings()
