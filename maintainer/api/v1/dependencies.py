"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the DB session and the entity services. Each
request builds its own repository and service over its own session; routes
depend only on these providers.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from maintainer.application.services import (
    RoleOptionService,
    RoleService,
    UserService,
)
from maintainer.infrastructure.persistence.database import get_db
from maintainer.infrastructure.persistence.repositories import (
    RoleOptionRepository,
    RoleRepository,
    UserRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_role_option_service(db: DbSession) -> RoleOptionService:
    return RoleOptionService(RoleOptionRepository(db))


def get_role_service(db: DbSession) -> RoleService:
    return RoleService(RoleRepository(db))


def get_user_service(db: DbSession) -> UserService:
    return UserService(UserRepository(db))
