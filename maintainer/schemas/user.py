"""User API schemas.

Usernames and passwords are checked with lookahead patterns, which
pydantic's pattern= does not support; they are validated with re instead.
"""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from maintainer.schemas.role import RoleDto, RoleReference

USERNAME_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d]{8,}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*\d)(?=.*[\W_]).{8,16}$")


def _check_username(value: str) -> str:
    if not USERNAME_PATTERN.match(value):
        raise ValueError(
            "must have at least 8 letters or digits, "
            "with a lowercase letter, an uppercase letter and a digit"
        )
    return value


def _check_password(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError(
            "must have 8 to 16 characters, with an uppercase letter, "
            "a lowercase letter, a digit and a symbol"
        )
    return value


class UserBase(BaseModel):
    """Fields shared by user create and update payloads."""

    dni: str = Field(..., pattern=r"^[0-9]{10}$")
    first_name: str = Field(..., min_length=1, max_length=60)
    last_name: str = Field(..., min_length=1, max_length=60)
    birth_date: date
    phone: str = Field(..., pattern=r"^[0-9+()\-. ]{10}$")
    username: str = Field(..., max_length=60)
    email: EmailStr
    active_session: bool = False
    role: RoleReference

    @field_validator("username")
    @classmethod
    def _username_format(cls, v: str) -> str:
        return _check_username(v)

    @field_validator("email")
    @classmethod
    def _email_length(cls, v: str) -> str:
        if len(v) > 60:
            raise ValueError("must be a maximum of 60 characters")
        return v


class UserCreate(UserBase):
    """Request body for creating a user. password is stored hashed."""

    password: str

    @field_validator("password")
    @classmethod
    def _password_format(cls, v: str) -> str:
        return _check_password(v)


class UserUpdate(UserBase):
    """Request body for a full replace of a user.

    password is accepted for compatibility but ignored: the stored hash is kept.
    """

    id: int
    status: bool
    row_version: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime
    password: str | None = None


class UserDto(BaseModel):
    """User transfer object. Never carries the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    dni: str
    first_name: str
    last_name: str
    birth_date: date
    phone: str
    username: str
    email: str
    active_session: bool
    status: bool
    row_version: str
    created_at: datetime
    updated_at: datetime
    role: RoleDto
