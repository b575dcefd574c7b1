"""RoleOption repository. Role options have no related sub-entities."""

from maintainer.infrastructure.persistence.models.role_option import RoleOption
from maintainer.infrastructure.persistence.repositories.base import EntityRepository


class RoleOptionRepository(EntityRepository[RoleOption]):
    """Role option repository."""

    model = RoleOption
    entity_name = "Role option"

    async def resolve(self, option: RoleOption) -> RoleOption:
        """Return the stored option with option.id, or a new unsaved copy of option."""
        if option.id is not None:
            stored = await self.db.get(RoleOption, option.id)
            if stored is not None:
                return stored
        return RoleOption(name=option.name, link=option.link)
