"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See maintainer.core.lifespan and
maintainer.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from maintainer.api.v1.router import build_api_router
from maintainer.core.config import get_settings
from maintainer.core.exception_handlers import register_exception_handlers
from maintainer.core.lifespan import create_lifespan
from maintainer.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application for the enabled services."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.include_router(build_api_router(settings), prefix="/api/v1")

    return app


app = create_app()
