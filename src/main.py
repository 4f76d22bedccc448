"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.asyncpg_setting import close_all_asyncpg_pools, get_asyncpg_pool
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Portal] Starting up...')

    tracing = TracingConfig(service_name='portal-service')
    tracing.setup()
    Logger.base.info('📊 [Portal] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Portal] Dependency injection wired')

    # Fail fast when the database is unreachable
    await get_asyncpg_pool()
    Logger.base.info('🏊 [Portal] Asyncpg pool initialized')

    Logger.base.info('✅ [Portal] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Portal] Shutting down...')

    await close_all_asyncpg_pools()
    Logger.base.info('🏊 [Portal] Asyncpg pools closed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Portal] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
