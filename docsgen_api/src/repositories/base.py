from __future__ import annotations

from typing import Any, Generic, List, Type, TypeVar, Union

from sqlalchemy import exists, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified

from src.core.exceptions import EntityNotFoundError
from src.db.base import Entity

T = TypeVar("T", bound=Entity)


class Repository(Generic[T]):
    """
    Generic repository over one entity type.

    Reads go to the database; writes are only staged on the session and reach
    the database when the owning unit of work commits. The repository never
    commits, rolls back or closes the session it was given.

    Note:
      Sessions are expected to be created with autoflush disabled, so reads
      do not observe writes staged in the same scope until they are committed.
    """

    def __init__(self, session: AsyncSession, model: Type[T]) -> None:
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: int) -> T:
        """
        Return the entity with the given id, tracked by the session.

        Raises:
            EntityNotFoundError: no record with that id exists.
        """
        entity = await self.session.get(self.model, entity_id)
        if entity is None:
            raise EntityNotFoundError(self.model, entity_id)
        return entity

    async def get_all(self) -> List[T]:
        """Return every entity of this type in store order."""
        result = await self.session.scalars(select(self.model))
        return list(result)

    async def add(self, entity: T) -> None:
        """Stage an entity for insertion."""
        self.session.add(entity)

    async def update(self, entity: T) -> None:
        """
        Stage a full overwrite of the row identified by ``entity.id``.

        Every column is written, whether or not it differs from what is stored.
        Columns never set on a freshly constructed ``entity`` are written as
        their default (or NULL). Existence is not checked; a missing row fails
        at commit.
        """
        if entity.id is None:
            raise ValueError(f"Cannot update {self.model.__name__} without an id.")

        state = inspect(entity)
        if state.transient:
            for attr in inspect(self.model).column_attrs:
                if attr.key not in state.dict:
                    setattr(entity, attr.key, _column_default(attr.columns[0]))
            make_transient_to_detached(entity)

        tracked = self.session.identity_map.get(state.key)
        if tracked is None:
            self.session.add(entity)
            tracked = entity
        elif tracked is not entity:
            for key in self._column_keys():
                if key in state.dict:
                    setattr(tracked, key, state.dict[key])

        tracked_dict = inspect(tracked).dict
        for key in self._column_keys():
            if key != "id" and key in tracked_dict:
                flag_modified(tracked, key)

    async def delete(self, entity: T) -> None:
        """
        Stage removal of an entity.

        Instances tracked by this session go through the session; any other
        instance is removed by its id.
        """
        state = inspect(entity)
        if state.session is self.session.sync_session:
            if state.pending:
                # never flushed, so there is no row to delete
                self.session.expunge(entity)
            else:
                await self.session.delete(entity)
            return
        await self.delete_by_id(entity.id)

    async def delete_by_id(self, entity_id: int) -> None:
        """
        Stage removal of the entity with the given id without loading it.

        The DELETE is emitted when the unit of work commits, after the writes
        staged before it. A pending insert of the same id is cancelled instead.
        Deleting an id that has no row is a no-op.
        """
        key = inspect(self.model).identity_key_from_primary_key((entity_id,))
        tracked = self.session.identity_map.get(key)
        if tracked is not None:
            await self.session.delete(tracked)
            return

        for pending in list(self.session.new):
            if type(pending) is self.model and pending.id == entity_id:
                self.session.expunge(pending)
                return

        # identity-only handle; its other columns are never loaded or written
        handle = self.model()
        handle.id = entity_id
        make_transient_to_detached(handle)
        self.session.add(handle)
        await self.session.delete(handle)

    async def exists(self, entity_or_id: Union[T, int]) -> bool:
        """Return True if a record with that id is present in the database."""
        entity_id = entity_or_id.id if isinstance(entity_or_id, Entity) else entity_or_id
        stmt = select(exists().where(self.model.id == entity_id))
        return bool(await self.session.scalar(stmt))

    def _column_keys(self) -> List[str]:
        return [attr.key for attr in inspect(self.model).column_attrs]


def _column_default(column) -> Any:
    """Scalar Python-side default of ``column``, or None."""
    default = column.default
    if default is not None and default.is_scalar:
        return default.arg
    return None
