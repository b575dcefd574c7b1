"""Application lifespan: startup and shutdown.

Startup configures logging and records which route groups are served;
shutdown disposes the SQL engine. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from maintainer.core.config import get_settings
from maintainer.infrastructure.persistence.database import dispose_engine
from maintainer.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the database engine."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "Starting %s %s (services: %s)",
        settings.app_name,
        settings.app_version,
        ", ".join(settings.service_names) or "none",
    )
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Shutdown complete")
