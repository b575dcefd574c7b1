"""User repository. Users are always read with their role and its options."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import ORMOption

from maintainer.infrastructure.persistence.models.role import Role
from maintainer.infrastructure.persistence.models.user import User
from maintainer.infrastructure.persistence.repositories.base import EntityRepository
from maintainer.infrastructure.persistence.repositories.role_repo import RoleRepository


class UserRepository(EntityRepository[User]):
    """User repository. Attaches the user's role by id, inserting it if unknown."""

    model = User
    entity_name = "User"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)
        self._roles = RoleRepository(db)

    def _load_options(self) -> list[ORMOption]:
        return [selectinload(User.role).selectinload(Role.role_options)]

    async def _attach_related(self, source: User, target: User) -> None:
        role = await self._roles.resolve(source.role)
        # A new role has no id yet; the flush fills role_id from the relationship.
        target.role_id = role.id
        target.role = role
