"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (cache connection,
Firestore HTTP client).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Backends are built by create_app() (app.state.backends). Startup
    connects the cache store (Redis only); shutdown disconnects it and
    closes the Firestore HTTP client.
    """
    backends = app.state.backends

    # ---- Startup ----
    await backends.connect()
    logger.info(
        "Started %s (database=%s, cache=%s)",
        app.state.settings.app_name,
        app.state.settings.database_backend,
        app.state.settings.cache_backend,
    )

    yield

    # ---- Shutdown ----
    await backends.close()
    logger.info("Backends closed")
