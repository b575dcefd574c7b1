"""Persistence repositories. Re-exports for dependency injection."""

from maintainer.infrastructure.persistence.repositories.base import EntityRepository
from maintainer.infrastructure.persistence.repositories.role_option_repo import (
    RoleOptionRepository,
)
from maintainer.infrastructure.persistence.repositories.role_repo import RoleRepository
from maintainer.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "EntityRepository",
    "RoleOptionRepository",
    "RoleRepository",
    "UserRepository",
]
