"""Persistence models: ORM entities and mixins."""

from maintainer.infrastructure.persistence.models.mixins import (
    IdMixin,
    MaintainedModel,
    StatusMixin,
    TimestampMixin,
    new_row_version,
)
from maintainer.infrastructure.persistence.models.role import Role, roles_role_options
from maintainer.infrastructure.persistence.models.role_option import RoleOption
from maintainer.infrastructure.persistence.models.user import User

__all__ = [
    "IdMixin",
    "MaintainedModel",
    "Role",
    "RoleOption",
    "StatusMixin",
    "TimestampMixin",
    "User",
    "new_row_version",
    "roles_role_options",
]
