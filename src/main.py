"""
Production FastAPI Application

Booking backend: inventory, bookings with optional Shopify checkout, admin queries.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    # One-time idempotent schema setup
    await create_db_and_tables()
    Logger.base.info('🗄️  [Booking Service] Database tables ensured')

    Logger.base.info('✅ [Booking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Booking Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Booking Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
