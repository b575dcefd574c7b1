"""Role option service."""

from maintainer.application.services.base import EntityService
from maintainer.infrastructure.persistence.models.role_option import RoleOption
from maintainer.schemas.role_option import (
    RoleOptionCreate,
    RoleOptionDto,
    RoleOptionReference,
    RoleOptionUpdate,
)


def role_option_reference(option: RoleOptionReference) -> RoleOption:
    """Unsaved RoleOption standing for a nested reference (resolved by id on write)."""
    return RoleOption(id=option.id, name=option.name, link=option.link)


class RoleOptionService(EntityService[RoleOption, RoleOptionDto]):
    """CRUD rules for role options."""

    entity_name = "Role option"
    dto_type = RoleOptionDto

    async def _from_create(self, payload: RoleOptionCreate) -> RoleOption:
        return RoleOption(name=payload.name, link=payload.link)

    def _from_update(self, payload: RoleOptionUpdate) -> RoleOption:
        return RoleOption(
            id=payload.id,
            name=payload.name,
            link=payload.link,
            status=payload.status,
            row_version=payload.row_version,
            created_at=payload.created_at,
            updated_at=payload.updated_at,
        )
