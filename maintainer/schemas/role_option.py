"""RoleOption API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RoleOptionCreate(BaseModel):
    """Request body for creating a role option."""

    name: str = Field(..., min_length=1, max_length=30)
    link: str = Field(..., min_length=1, max_length=60)


class RoleOptionUpdate(RoleOptionCreate):
    """Request body for a full replace of a role option.

    status and created_at are accepted but the stored values are kept.
    """

    id: int
    status: bool
    row_version: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime


class RoleOptionReference(BaseModel):
    """Role option nested in a role payload.

    An id that matches a stored option attaches it; otherwise the option is
    inserted as new.
    """

    id: int | None = None
    name: str = Field(..., min_length=1, max_length=30)
    link: str = Field(..., min_length=1, max_length=60)


class RoleOptionDto(BaseModel):
    """Role option transfer object."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    link: str
    status: bool
    row_version: str
    created_at: datetime
    updated_at: datetime
