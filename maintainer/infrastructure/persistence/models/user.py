"""User ORM model. Every user belongs to exactly one role."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from maintainer.infrastructure.persistence.database import Base
from maintainer.infrastructure.persistence.models.mixins import (
    MaintainedModel,
    new_row_version,
)
from maintainer.infrastructure.persistence.models.role import Role


class User(MaintainedModel, Base):
    """User. Table: users. Unique dni, email, phone and username.

    password holds a bcrypt hash, never the plain value.
    """

    __tablename__ = "users"

    dni: Mapped[str] = mapped_column(String(10), nullable=False)
    first_name: Mapped[str] = mapped_column(String(60), nullable=False)
    last_name: Mapped[str] = mapped_column(String(60), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    phone: Mapped[str] = mapped_column(String(10), nullable=False)
    username: Mapped[str] = mapped_column(String(60), nullable=False)
    email: Mapped[str] = mapped_column(String(60), nullable=False)
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    active_session: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id"), nullable=False, index=True
    )
    row_version: Mapped[str] = mapped_column(String(32), nullable=False)

    role: Mapped[Role] = relationship(cascade="save-update", lazy="raise")

    __table_args__ = (
        Index("ix_uq_users_dni", "dni", unique=True),
        Index("ix_uq_users_email", "email", unique=True),
        Index("ix_uq_users_phone", "phone", unique=True),
        Index("ix_uq_users_username", "username", unique=True),
    )
    __mapper_args__ = {
        "version_id_col": row_version,
        "version_id_generator": new_row_version,
    }
