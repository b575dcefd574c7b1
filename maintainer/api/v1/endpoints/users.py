"""Users API: create, list, get, full replace and soft delete.

Passwords are only accepted on create; responses never include them.
"""

from maintainer.api.v1.dependencies import get_user_service
from maintainer.api.v1.pipeline import build_entity_router
from maintainer.schemas.user import UserCreate, UserUpdate

UNIQUE_KEYS = {
    "ix_uq_users_dni": ("dni", "The DNI of the user already exists."),
    "ix_uq_users_email": ("email", "The email of the user already exists."),
    "ix_uq_users_phone": ("phone", "The phone of the user already exists."),
    "ix_uq_users_username": ("username", "The username of the user already exists."),
    "ix_uq_roles_name": ("role", "The name of the role already exists."),
    "ix_uq_role_options_name": (
        "role.role_options",
        "The name of a role option already exists.",
    ),
    "ix_uq_role_options_link": (
        "role.role_options",
        "The link of a role option already exists.",
    ),
}

router = build_entity_router(
    name="user",
    component="User controller",
    get_service=get_user_service,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    unique_keys=UNIQUE_KEYS,
)
