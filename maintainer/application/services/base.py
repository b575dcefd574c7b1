"""Entity service: the business rules shared by every maintained entity.

Create maps the payload to a new entity. Update is a full replace that keeps
the fields a caller may not set. Delete is a status flip that refuses
records already inactive. Store failures are not caught here.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from maintainer.application.filters import EntityFilter, IdEquals
from maintainer.domain import status as record_status
from maintainer.domain.exceptions import (
    RecordAlreadyDeletedException,
    RecordNotFoundException,
)
from maintainer.infrastructure.persistence.repositories.base import EntityRepository
from maintainer.shared.logging import get_logger, log_operation
from maintainer.shared.utils.datetime import utc_now

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")
DtoType = TypeVar("DtoType", bound=BaseModel)


class EntityService(Generic[ModelType, DtoType]):
    """Generic business component over an EntityRepository.

    Subclasses set ``entity_name`` and ``dto_type`` and implement
    ``_from_create`` (a coroutine) and ``_from_update``. Fields listed in
    ``preserved_fields`` are copied from the stored record on update, whatever
    the payload says.
    """

    entity_name: str
    dto_type: type[DtoType]
    preserved_fields: tuple[str, ...] = ("created_at", "status")

    def __init__(self, repository: EntityRepository[Any]) -> None:
        self._repository = repository

    @property
    def _component(self) -> str:
        return f"{self.entity_name} service"

    async def _from_create(self, payload: Any) -> ModelType:
        """Build a new entity (no id, timestamps or row version) from a create payload."""
        raise NotImplementedError

    def _from_update(self, payload: Any) -> ModelType:
        """Build a full entity, id and row version included, from an update payload."""
        raise NotImplementedError

    def to_dto(self, entity: ModelType) -> DtoType:
        return self.dto_type.model_validate(entity)

    async def create(self, payload: Any) -> DtoType:
        with log_operation(logger, self._component, "Create"):
            entity = await self._from_create(payload)
            created = await self._repository.create(entity)
            return self.to_dto(created)

    async def get_all(
        self, limit: int, offset: int, entity_filter: EntityFilter | None = None
    ) -> list[DtoType]:
        with log_operation(logger, self._component, "GetAll"):
            records = await self._repository.get_all(limit, offset, entity_filter)
            return [self.to_dto(r) for r in records]

    async def get_one(self, entity_filter: EntityFilter) -> DtoType | None:
        with log_operation(logger, self._component, "GetOne"):
            record = await self._repository.get_one(entity_filter)
            return self.to_dto(record) if record is not None else None

    async def update(self, payload: Any) -> DtoType | None:
        """Replace the stored record; returns None when no record has payload.id."""
        with log_operation(logger, self._component, "Update") as log_info:
            current = await self._repository.get_one(IdEquals(payload.id))
            if current is None:
                logger.info("%s - %s %s not found.", log_info, self.entity_name, payload.id)
                return None
            entity = self._from_update(payload)
            for field in self.preserved_fields:
                setattr(entity, field, getattr(current, field))
            entity.updated_at = utc_now()
            updated = await self._repository.update(entity)
            return self.to_dto(updated)

    async def delete(self, record_id: int) -> None:
        """Soft-delete the record.

        Raises:
            RecordNotFoundException: No record has this id.
            RecordAlreadyDeletedException: The record is already inactive.
        """
        with log_operation(logger, self._component, "Delete"):
            current: Any = await self._repository.get_one(IdEquals(record_id))
            if current is None:
                raise RecordNotFoundException(self.entity_name, record_id)
            if current.status == record_status.INACTIVE:
                raise RecordAlreadyDeletedException(self.entity_name, record_id)
            current.status = record_status.INACTIVE
            current.updated_at = utc_now()
            await self._repository.delete(current)
