"""Role repository. Roles are always read with their role options."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import ORMOption

from maintainer.infrastructure.persistence.models.role import Role
from maintainer.infrastructure.persistence.repositories.base import EntityRepository
from maintainer.infrastructure.persistence.repositories.role_option_repo import (
    RoleOptionRepository,
)


class RoleRepository(EntityRepository[Role]):
    """Role repository. Attaches existing role options by id, inserts unknown ones."""

    model = Role
    entity_name = "Role"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)
        self._options = RoleOptionRepository(db)

    def _load_options(self) -> list[ORMOption]:
        return [selectinload(Role.role_options)]

    async def _attach_related(self, source: Role, target: Role) -> None:
        target.role_options = [
            await self._options.resolve(option) for option in source.role_options
        ]

    async def resolve(self, role: Role) -> Role:
        """Return the stored role with role.id, or a new unsaved copy of role.

        A stored role is loaded with its options so it can be attached and
        serialized without further lazy loads.
        """
        if role.id is not None:
            stored = await self.db.get(
                Role, role.id, options=[selectinload(Role.role_options)]
            )
            if stored is not None:
                return stored
        new_role = Role(name=role.name)
        await self._attach_related(role, new_role)
        return new_role
