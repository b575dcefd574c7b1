"""API v1 router aggregation.

Health is always served. Each entity family is included only when it is
listed in ENABLED_SERVICES, so one codebase can run as three processes.
"""

from fastapi import APIRouter

from maintainer.api.v1.endpoints import health, role_options, roles, users
from maintainer.core.config import Settings

_SERVICE_ROUTERS: dict[str, tuple[APIRouter, str]] = {
    "role": (roles.router, "/roles"),
    "role-option": (role_options.router, "/role-options"),
    "user": (users.router, "/users"),
}


def build_api_router(settings: Settings) -> APIRouter:
    """Return the v1 router with health plus every enabled entity family."""
    api_router = APIRouter()
    api_router.include_router(health.router, prefix="/health", tags=["health"])
    for service in settings.service_names:
        router, prefix = _SERVICE_ROUTERS[service]
        api_router.include_router(router, prefix=prefix, tags=[prefix.strip("/")])
    return api_router
