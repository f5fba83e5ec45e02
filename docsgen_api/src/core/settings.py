from __future__ import annotations

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.exceptions import ConfigurationError

# Accepts "a,b" as well as '["a", "b"]' from the environment
CommaList = Annotated[List[str], NoDecode]


class AppSettings(BaseSettings):
    """
    Settings of the HTTP service, read from the environment or a .env file.

    Database settings live in src.db.config.Settings.
    """

    APP_NAME: str = Field(default="DocsGen API")
    APP_DESCRIPTION: str = Field(
        default=(
            "Backend API for university course documentation: knowledge branches, "
            "specialties, teachers, subjects and syllabi."
        )
    )
    APP_VERSION: str = Field(default="0.1.0")
    ENVIRONMENT: Optional[str] = Field(default=None, description="Label such as dev, test or prod")

    # Any origin by default; credentials are never combined with "*"
    CORS_ORIGINS: CommaList = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False)
    CORS_ALLOW_METHODS: CommaList = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: CommaList = Field(default_factory=lambda: ["*"])

    JWT_SECRET: Optional[str] = Field(default=None, description="HMAC key used to sign access tokens")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 12)
    ADMIN_PASSWORD_HASH: Optional[str] = Field(
        default=None,
        description="bcrypt hash of the administrator password (python -m src.core.security <password>)",
    )

    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default=True, description="alembic upgrade head at startup")
    AUTO_SEED: bool = Field(default=False, description="Load demo data at startup into an empty database")

    LOG_LEVEL: str = Field(default="INFO")

    # Built single page application; empty disables it
    STATIC_DIR: Optional[str] = Field(default="wwwroot")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def _split_list(cls, v: Any) -> List[str]:
        if isinstance(v, str):
            text = v.strip()
            if text.startswith("["):
                v = json.loads(text)
            else:
                v = [p.strip() for p in text.split(",") if p.strip()]
        return list(v or ["*"])

    # PUBLIC_INTERFACE
    def require(self, *keys: str) -> None:
        """
        Fail fast on missing configuration.

        Raises:
            ConfigurationError: naming the first of ``keys`` that is unset or empty.
        """
        for key in keys:
            if not getattr(self, key, None):
                raise ConfigurationError(key)


# The service cannot issue or check tokens without these
REQUIRED_SETTINGS = ("JWT_SECRET", "ADMIN_PASSWORD_HASH")


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """Read the settings; a fresh instance per call so environment changes are seen."""
    return AppSettings()
