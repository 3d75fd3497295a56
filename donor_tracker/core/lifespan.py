"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: the SQLite database and store,
and the shared HTTP client for the upstream donor API. No business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from donor_tracker.core.config import get_settings
from donor_tracker.infrastructure.external.donor_api import DonorApiClient
from donor_tracker.infrastructure.persistence.database import Database
from donor_tracker.infrastructure.persistence.store import DonorTaskStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: database + store (tables created if missing), upstream
    HTTP client. Shutdown order: HTTP client close, database dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    database = Database(settings.database_path, echo=settings.database_echo)
    store = DonorTaskStore(
        database, allow_status_correction=settings.allow_status_correction
    )
    await store.initialize()
    app.state.database = database
    app.state.store = store

    app.state.donor_api_http_client = httpx.AsyncClient(
        base_url=settings.donor_api_base_url,
        timeout=settings.donor_api_timeout_seconds,
    )
    app.state.donor_api_client = DonorApiClient(app.state.donor_api_http_client)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "donor_api_http_client", None) is not None:
        await app.state.donor_api_http_client.aclose()
        app.state.donor_api_http_client = None
        logger.info("Donor API HTTP client closed")

    await database.dispose()
