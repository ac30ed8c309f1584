"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_engine,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultConnectionProbe, DefaultStartupProbe
from infrastructure.settings import get_settings, get_tenancy_settings
from infrastructure.version import __version__
from platforms import presentation as platforms_presentation


@asynccontextmanager
async def liquidlab_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)

    probe = DefaultStartupProbe()
    tenancy = get_tenancy_settings()
    probe.application_started(
        version=__version__,
        root_domain=tenancy.root_domain,
        fail_closed=tenancy.fail_closed,
    )

    yield

    await close_database_connections()
    probe.application_stopped()


app = FastAPI(
    title="LiquidLab API",
    description="Multi-tenant white-label trading platforms",
    version=__version__,
    lifespan=liquidlab_lifespan,
)

platforms_presentation.register_exception_handlers(app)

# Management API (never platform-scoped)
app.include_router(platforms_presentation.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    engine: Annotated[AsyncEngine, Depends(get_read_engine)],
) -> dict:
    """Check database connection health."""
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
        return {"status": "ok", "connected": True}
    except Exception as e:
        DefaultConnectionProbe().health_check_failed(e)
        return {
            "status": "error",
            "connected": False,
            "error": str(e),
        }


# Tenant sites, resolved from the request hostname
app.include_router(platforms_presentation.site_router)
