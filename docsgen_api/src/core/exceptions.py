from __future__ import annotations

from typing import Any


class DocsGenError(Exception):
    """Base class for application errors."""


class EntityNotFoundError(DocsGenError):
    """
    Raised when an entity lookup by identity finds no record.

    Attributes:
        entity_type: mapped class that was queried
        entity_id: requested identity
    """

    def __init__(self, entity_type: type, entity_id: Any, message: str | None = None) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type.__name__} with id {entity_id} not found.")


class InvalidReferenceError(DocsGenError):
    """Raised when a payload points at a related entity that does not exist."""

    def __init__(self, entity_type: type, entity_id: Any, field: str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"'{field}' refers to missing {entity_type.__name__} with id {entity_id}.")


class AuthenticationError(DocsGenError):
    """Raised when credentials are rejected."""


class ConfigurationError(DocsGenError):
    """Raised when a required configuration property is not set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Configuration property '{key}' is not set.")
