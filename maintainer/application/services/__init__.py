"""Application services: business rules for roles, role options and users."""

from maintainer.application.services.base import EntityService
from maintainer.application.services.role_option_service import RoleOptionService
from maintainer.application.services.role_service import RoleService
from maintainer.application.services.user_service import UserService

__all__ = [
    "EntityService",
    "RoleOptionService",
    "RoleService",
    "UserService",
]
