"""Role service. A role payload carries the full list of its role options."""

from maintainer.application.services.base import EntityService
from maintainer.application.services.role_option_service import role_option_reference
from maintainer.infrastructure.persistence.models.role import Role
from maintainer.schemas.role import RoleCreate, RoleDto, RoleReference, RoleUpdate


def role_reference(role: RoleReference) -> Role:
    """Unsaved Role standing for a nested reference (resolved by id on write)."""
    return Role(
        id=role.id,
        name=role.name,
        role_options=[role_option_reference(o) for o in role.role_options],
    )


class RoleService(EntityService[Role, RoleDto]):
    """CRUD rules for roles."""

    entity_name = "Role"
    dto_type = RoleDto

    async def _from_create(self, payload: RoleCreate) -> Role:
        return Role(
            name=payload.name,
            role_options=[role_option_reference(o) for o in payload.role_options],
        )

    def _from_update(self, payload: RoleUpdate) -> Role:
        return Role(
            id=payload.id,
            name=payload.name,
            status=payload.status,
            row_version=payload.row_version,
            created_at=payload.created_at,
            updated_at=payload.updated_at,
            role_options=[role_option_reference(o) for o in payload.role_options],
        )
