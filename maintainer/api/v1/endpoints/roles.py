"""Roles API: create, list, get, full replace and soft delete.

Role payloads carry their role options; options are attached by id when
they exist and inserted otherwise.
"""

from maintainer.api.v1.dependencies import get_role_service
from maintainer.api.v1.pipeline import build_entity_router
from maintainer.schemas.role import RoleCreate, RoleUpdate

UNIQUE_KEYS = {
    "ix_uq_roles_name": ("name", "The name of the role already exists."),
    "ix_uq_role_options_name": (
        "role_options",
        "The name of a role option already exists.",
    ),
    "ix_uq_role_options_link": (
        "role_options",
        "The link of a role option already exists.",
    ),
}

router = build_entity_router(
    name="role",
    component="Role controller",
    get_service=get_role_service,
    create_schema=RoleCreate,
    update_schema=RoleUpdate,
    unique_keys=UNIQUE_KEYS,
)
