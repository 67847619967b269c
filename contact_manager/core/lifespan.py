"""Application lifespan: startup and shutdown.

No business logic here, only wiring of infrastructure (logging, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from contact_manager.core.config import get_settings
from contact_manager.infrastructure.persistence import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup, yield, then dispose the SQL engine on exit."""
    settings = get_settings()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
    logger.info("Shutdown complete")
