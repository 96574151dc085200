"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (database handle, auth security).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.dependencies import AuthSecurity
from app.core.config import get_settings
from app.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: create the Database handle and AuthSecurity on app.state.
    Shutdown: dispose the SQL engine.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.uses_insecure_secret_key:
        logger.warning(
            "SECRET_KEY is not set; tokens are signed with the insecure development default"
        )

    database = Database(settings)
    app.state.database = database
    app.state.auth_security = AuthSecurity(settings)
    logger.info("Database engine created for %s", database.engine.url.render_as_string(hide_password=True))

    try:
        yield
    finally:
        # ---- Shutdown ----
        await database.dispose()
