"""Role ORM model and the roles_role_options association table."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from maintainer.infrastructure.persistence.database import Base
from maintainer.infrastructure.persistence.models.mixins import (
    MaintainedModel,
    new_row_version,
)
from maintainer.infrastructure.persistence.models.role_option import RoleOption

roles_role_options = Table(
    "roles_role_options",
    Base.metadata,
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_option_id",
        Integer,
        ForeignKey("role_options.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Role(MaintainedModel, Base):
    """Role. Table: roles. Unique name; grants a set of role options."""

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(30), nullable=False)
    row_version: Mapped[str] = mapped_column(String(32), nullable=False)

    # Only save-update cascades: attached options are resolved by the
    # repository, never merged or deleted through the role.
    role_options: Mapped[list[RoleOption]] = relationship(
        secondary=roles_role_options,
        cascade="save-update",
        lazy="raise",
        order_by=RoleOption.id,
    )
    users: Mapped[list["User"]] = relationship(  # noqa: F821
        viewonly=True, lazy="raise"
    )

    __table_args__ = (Index("ix_uq_roles_name", "name", unique=True),)
    __mapper_args__ = {
        "version_id_col": row_version,
        "version_id_generator": new_row_version,
    }
