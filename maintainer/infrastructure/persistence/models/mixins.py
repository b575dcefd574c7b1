"""SQLAlchemy mixins shared by every maintained entity.

Provides: TimestampMixin (created_at/updated_at), StatusMixin (soft-delete
flag) and new_row_version, the generator behind each model's concurrency
token. The token column itself is declared on each model so the mapper's
version_id_col can reference it in the class body.
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


def new_row_version(_current: Any = None) -> str:
    """Return a fresh opaque row version (uuid4 hex); the previous value is ignored."""
    return uuid.uuid4().hex


class IdMixin:
    """Integer identity primary key. Ids are store-assigned and never reused."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class StatusMixin:
    """Soft-delete flag: True while active, False once deleted. Never reverts."""

    @declared_attr
    def status(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean, nullable=False, server_default=text("true"), index=True
        )


class MaintainedModel(IdMixin, TimestampMixin, StatusMixin):
    """Combined mixin: id + timestamps + status. Base of Role, RoleOption and User."""

    __abstract__ = True
