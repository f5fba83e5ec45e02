from __future__ import annotations

import logging
from typing import Any, Dict, Type

from sqlalchemy.ext.asyncio import AsyncSession

from src.db.base import Entity
from .base import Repository, T

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Explicit transaction for one logical operation (typically one request).

    Hands out one repository per entity type, all sharing the same session.
    Staged writes reach the database only through ``commit``; leaving the
    ``async with`` block on an exception rolls them back. Nothing is ever
    committed implicitly.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._repositories: Dict[Type[Entity], Repository[Any]] = {}

    def repository(self, model: Type[T]) -> Repository[T]:
        """Return the repository for ``model`` bound to this unit of work."""
        repo = self._repositories.get(model)
        if repo is None:
            repo = Repository(self.session, model)
            self._repositories[model] = repo
        return repo

    async def commit(self) -> None:
        """Flush staged writes in call order and commit them atomically."""
        await self.session.commit()

    async def flush(self) -> None:
        """
        Send staged writes to the database inside the open transaction.

        Generated ids become available; nothing is durable until ``commit``.
        """
        await self.session.flush()

    async def rollback(self) -> None:
        """Discard every staged write."""
        await self.session.rollback()

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            await self.rollback()
