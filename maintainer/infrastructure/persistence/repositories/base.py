"""Base repository: filtered reads, inserts and version-guarded row replaces.

Every maintained entity goes through the same five operations. Subclasses set
the model, the eager loads that make a record complete for serialization, and
how related sub-entities are attached before a write.

Reads return detached snapshots: the session is cleared after each read, so
callers can never mutate tracked state by accident.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.orm.interfaces import ORMOption

from maintainer.application.filters import EntityFilter, IdEquals, StatusEquals
from maintainer.infrastructure.persistence.database import Base
from maintainer.infrastructure.persistence.retry import (
    commit_or_timeout,
    run_with_retry,
)
from maintainer.shared.logging import get_logger, log_operation

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class EntityRepository(Generic[ModelType]):
    """Generic repository with create, get_all, get_one, update and delete.

    Subclasses set ``model`` and ``entity_name`` and may override
    ``_load_options`` and ``_attach_related``. Writes commit immediately; a
    transient failure on commit surfaces as StoreTimeoutException and is never
    retried. Reads run under the store retry budget.
    """

    model: type[ModelType]
    entity_name: str

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def _component(self) -> str:
        return f"{self.entity_name} repository"

    def _load_options(self) -> list[ORMOption]:
        """Eager loads applied to every read (override for relationships)."""
        return []

    async def _attach_related(self, source: ModelType, target: ModelType) -> None:
        """Copy related sub-entities of source onto target as stored rows.

        Override in subclasses with relationships. Each sub-entity is resolved
        by id when a row with that id exists; otherwise a new row is inserted
        (its id is dropped).
        """

    def _where(self, entity_filter: EntityFilter | None) -> list[ColumnElement[bool]]:
        model: Any = self.model
        match entity_filter:
            case None:
                return []
            case StatusEquals(status=status):
                return [model.status == status]
            case IdEquals(id=record_id):
                return [model.id == record_id]
        raise TypeError(f"Unsupported filter: {entity_filter!r}")

    def _select(self, entity_filter: EntityFilter | None) -> Select[tuple[ModelType]]:
        return (
            select(self.model)
            .where(*self._where(entity_filter))
            .options(*self._load_options())
            .execution_options(populate_existing=True)
        )

    async def get_all(
        self, limit: int, offset: int, entity_filter: EntityFilter | None = None
    ) -> list[ModelType]:
        """Return at most ``limit`` records after skipping ``offset``, ordered by id."""
        model: Any = self.model
        stmt = self._select(entity_filter).order_by(model.id).offset(offset).limit(limit)

        async def fetch() -> list[ModelType]:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

        with log_operation(logger, self._component, "GetAll"):
            records = await run_with_retry(self.db, "select", fetch)
            self.db.expunge_all()
            return records

    async def get_one(self, entity_filter: EntityFilter) -> ModelType | None:
        """Return the first record matching the filter (by id), or None."""
        model: Any = self.model
        stmt = self._select(entity_filter).order_by(model.id).limit(1)

        async def fetch() -> ModelType | None:
            result = await self.db.execute(stmt)
            return result.scalars().first()

        with log_operation(logger, self._component, "GetOne"):
            record = await run_with_retry(self.db, "select", fetch)
            self.db.expunge_all()
            return record

    async def create(self, entity: ModelType) -> ModelType:
        """Insert the entity (and any new sub-entities), commit, return the stored row."""
        with log_operation(logger, self._component, "Create"):
            await self._attach_related(entity, entity)
            self.db.add(entity)
            await commit_or_timeout(self.db)
            return await self._reload(entity)

    async def update(self, entity: ModelType) -> ModelType:
        """Replace the stored row with ``entity``; raises StaleDataError on a token mismatch."""
        with log_operation(logger, self._component, "Update"):
            return await self._replace(entity)

    async def delete(self, entity: ModelType) -> ModelType:
        """Persist a status flip; same version-guarded replace as update."""
        with log_operation(logger, self._component, "Delete"):
            return await self._replace(entity)

    async def _replace(self, entity: ModelType) -> ModelType:
        model: Any = entity
        stmt = self._select(IdEquals(model.id))
        current: Any = (await self.db.execute(stmt)).scalars().first()
        if current is None or current.row_version != model.row_version:
            raise StaleDataError(
                f"{self.entity_name} {model.id} was modified by another user "
                f"(expected row version {model.row_version!r})"
            )
        # The row is now tracked, so merge copies the columns onto it and the
        # UPDATE is guarded by the loaded row_version.
        merged = await self.db.merge(entity)
        await self._attach_related(entity, merged)
        await commit_or_timeout(self.db)
        return await self._reload(merged)

    async def _reload(self, entity: ModelType) -> ModelType:
        """Fetch the committed row with its eager loads as a detached snapshot."""
        model: Any = entity
        result = await self.db.execute(self._select(IdEquals(model.id)))
        stored = result.scalars().one()
        self.db.expunge_all()
        return stored
