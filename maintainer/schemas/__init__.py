"""Pydantic request/response schemas for the API."""

from maintainer.schemas.envelope import ApiResponse
from maintainer.schemas.health import HealthResponse
from maintainer.schemas.pagination import PaginationParams
from maintainer.schemas.role import RoleCreate, RoleDto, RoleReference, RoleUpdate
from maintainer.schemas.role_option import (
    RoleOptionCreate,
    RoleOptionDto,
    RoleOptionReference,
    RoleOptionUpdate,
)
from maintainer.schemas.user import UserCreate, UserDto, UserUpdate

__all__ = [
    "ApiResponse",
    "HealthResponse",
    "PaginationParams",
    "RoleCreate",
    "RoleDto",
    "RoleOptionCreate",
    "RoleOptionDto",
    "RoleOptionReference",
    "RoleOptionUpdate",
    "RoleReference",
    "RoleUpdate",
    "UserCreate",
    "UserDto",
    "UserUpdate",
]
