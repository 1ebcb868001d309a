"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only logging setup and DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from codelists.core.config import get_settings
from codelists.infrastructure.persistence.database import dispose_engine
from codelists.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: configure logging. Shutdown: dispose the SQL engine.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; storage-backed endpoints will answer 503")

    yield

    # ---- Shutdown ----
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)
