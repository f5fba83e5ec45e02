from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Type

from pydantic import BaseModel

from src.core.exceptions import EntityNotFoundError, InvalidReferenceError
from src.db.base import Entity
from src.repositories.base import Repository, T
from src.repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for services. Holds a unit of work shared across repositories.

    Services keep validation and orchestration, delegating data access to
    repositories.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow


class EntityService(BaseService, Generic[T]):
    """
    CRUD service for one entity type.

    Subclasses set ``model`` and may override ``validate`` to check the
    references carried by a payload. Updates replace every field of the
    stored record with the payload.
    """

    model: Type[T]

    def __init__(self, uow: UnitOfWork) -> None:
        super().__init__(uow)
        self.repo: Repository[T] = uow.repository(self.model)

    # PUBLIC_INTERFACE
    async def list_all(self) -> List[T]:
        """Return all entities."""
        return await self.repo.get_all()

    # PUBLIC_INTERFACE
    async def get(self, entity_id: int) -> T:
        """Return one entity; raises EntityNotFoundError when absent."""
        return await self.repo.get_by_id(entity_id)

    # PUBLIC_INTERFACE
    async def create(self, payload: BaseModel) -> T:
        """Validate, insert and commit a new entity."""
        await self.validate(payload)
        entity = self.model(**payload.model_dump())
        await self.repo.add(entity)
        await self.uow.commit()
        logger.info("Created %s id=%s", self.model.__name__, entity.id)
        return entity

    # PUBLIC_INTERFACE
    async def update(self, entity_id: int, payload: BaseModel) -> T:
        """Replace every field of an existing entity and commit."""
        if not await self.repo.exists(entity_id):
            raise EntityNotFoundError(self.model, entity_id)
        await self.validate(payload)
        entity = self.model(id=entity_id, **payload.model_dump())
        await self.repo.update(entity)
        await self.uow.commit()
        logger.info("Updated %s id=%s", self.model.__name__, entity_id)
        return await self.repo.get_by_id(entity_id)

    # PUBLIC_INTERFACE
    async def delete(self, entity_id: int) -> None:
        """Delete an existing entity and commit."""
        if not await self.repo.exists(entity_id):
            raise EntityNotFoundError(self.model, entity_id)
        await self.repo.delete_by_id(entity_id)
        await self.uow.commit()
        logger.info("Deleted %s id=%s", self.model.__name__, entity_id)

    async def validate(self, payload: BaseModel) -> None:
        """Hook for payload checks that need the database."""

    async def ensure_reference(
        self, model: Type[Entity], entity_id: Optional[Any], field: str
    ) -> None:
        """Raise InvalidReferenceError if ``entity_id`` is set but missing."""
        if entity_id is None:
            return
        if not await self.uow.repository(model).exists(entity_id):
            raise InvalidReferenceError(model, entity_id, field)
