"""User service. Passwords are hashed on create and never changed by update."""

import asyncio

from maintainer.application.services.base import EntityService
from maintainer.application.services.role_service import role_reference
from maintainer.infrastructure.persistence.models.user import User
from maintainer.infrastructure.security.password import get_password_hash
from maintainer.schemas.user import UserBase, UserCreate, UserDto, UserUpdate


def _profile(payload: UserBase) -> dict:
    return {
        "dni": payload.dni,
        "first_name": payload.first_name,
        "last_name": payload.last_name,
        "birth_date": payload.birth_date,
        "phone": payload.phone,
        "username": payload.username,
        "email": str(payload.email),
        "active_session": payload.active_session,
        "role": role_reference(payload.role),
    }


class UserService(EntityService[User, UserDto]):
    """CRUD rules for users. The stored password survives every update."""

    entity_name = "User"
    dto_type = UserDto
    preserved_fields = ("created_at", "status", "password")

    async def _from_create(self, payload: UserCreate) -> User:
        # bcrypt is CPU-bound; hash off the event loop.
        password = await asyncio.to_thread(get_password_hash, payload.password)
        return User(password=password, **_profile(payload))

    def _from_update(self, payload: UserUpdate) -> User:
        return User(
            id=payload.id,
            status=payload.status,
            row_version=payload.row_version,
            created_at=payload.created_at,
            updated_at=payload.updated_at,
            **_profile(payload),
        )
