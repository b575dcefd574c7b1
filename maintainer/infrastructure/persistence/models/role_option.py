"""RoleOption ORM model. A menu entry (name + link) that roles grant."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from maintainer.infrastructure.persistence.database import Base
from maintainer.infrastructure.persistence.models.mixins import (
    MaintainedModel,
    new_row_version,
)


class RoleOption(MaintainedModel, Base):
    """Role option. Table: role_options. Unique name and unique link."""

    __tablename__ = "role_options"

    name: Mapped[str] = mapped_column(String(30), nullable=False)
    link: Mapped[str] = mapped_column(String(60), nullable=False)
    row_version: Mapped[str] = mapped_column(String(32), nullable=False)

    roles: Mapped[list["Role"]] = relationship(  # noqa: F821
        secondary="roles_role_options", viewonly=True, lazy="raise"
    )

    __table_args__ = (
        Index("ix_uq_role_options_name", "name", unique=True),
        Index("ix_uq_role_options_link", "link", unique=True),
    )
    __mapper_args__ = {
        "version_id_col": row_version,
        "version_id_generator": new_row_version,
    }
