"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from maintainer.schemas.role_option import RoleOptionDto, RoleOptionReference


class RoleCreate(BaseModel):
    """Request body for creating a role with its role options."""

    name: str = Field(..., min_length=1, max_length=30)
    role_options: list[RoleOptionReference] = Field(default_factory=list)


class RoleUpdate(RoleCreate):
    """Request body for a full replace of a role (options included)."""

    id: int
    status: bool
    row_version: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime


class RoleReference(BaseModel):
    """Role nested in a user payload: attached by id, inserted if unknown."""

    id: int | None = None
    name: str = Field(..., min_length=1, max_length=30)
    role_options: list[RoleOptionReference] = Field(default_factory=list)


class RoleDto(BaseModel):
    """Role transfer object (with role options, without users)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: bool
    row_version: str
    created_at: datetime
    updated_at: datetime
    role_options: list[RoleOptionDto] = Field(default_factory=list)
