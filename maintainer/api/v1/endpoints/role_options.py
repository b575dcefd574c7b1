"""Role options API: create, list, get, full replace and soft delete."""

from maintainer.api.v1.dependencies import get_role_option_service
from maintainer.api.v1.pipeline import build_entity_router
from maintainer.schemas.role_option import RoleOptionCreate, RoleOptionUpdate

UNIQUE_KEYS = {
    "ix_uq_role_options_name": ("name", "The name of the role option already exists."),
    "ix_uq_role_options_link": ("link", "The link of the role option already exists."),
}

router = build_entity_router(
    name="role_option",
    component="Role option controller",
    get_service=get_role_option_service,
    create_schema=RoleOptionCreate,
    update_schema=RoleOptionUpdate,
    unique_keys=UNIQUE_KEYS,
)
