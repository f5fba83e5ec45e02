"""
Persistence layer: declarative base, database settings, the async engine and
the per-request session dependency.
"""

from .base import Base, Entity
from .config import get_settings, Settings
from .session import (
    dispose_engine,
    get_engine,
    get_async_session,
    create_session_maker,
    enable_sqlite_foreign_keys,
    get_session_maker,
)

# Import models to ensure they are registered with SQLAlchemy metadata
# when the db package is imported.
from . import models as models  # noqa: F401

__all__ = [
    "Base",
    "Entity",
    "Settings",
    "get_settings",
    "dispose_engine",
    "get_engine",
    "get_async_session",
    "get_session_maker",
    "create_session_maker",
    "enable_sqlite_foreign_keys",
    "models",
]
