"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, Optional

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    ADMIN_BASE,
    BOOKING_BASE,
    HEALTH,
    ORDER_BASE,
    ROOT,
)
from src.platform.database.orm_db_setting import ping_database
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.booking.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.booking.driving_adapter.http_controller.order_controller import (
    router as order_router,
)


def create_app(
    *,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[Any]]] = None,
    title_suffix: str = '',
    description: str = 'Booking backend with Shopify checkout',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])
    app.include_router(order_router, prefix=ORDER_BASE, tags=['orders'])
    app.include_router(admin_router, prefix=ADMIN_BASE, tags=['admin'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register root status and health endpoints."""

    @app.get(ROOT)
    async def root() -> dict[str, str]:
        """Liveness; reports the store state without failing on it."""
        database_ok = await ping_database()
        return {
            'status': 'OK',
            'message': 'Booking backend is running',
            'database': 'connected' if database_ok else 'unavailable',
        }

    @app.get(HEALTH)
    async def health_check() -> JSONResponse:
        """Health check endpoint for container orchestration; 500 when the store is unreachable."""
        if await ping_database():
            return JSONResponse(
                {'status': 'OK', 'message': 'Booking API is running', 'database': 'connected'}
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                'status': 'ERROR',
                'message': 'Booking backend encountered an issue',
                'database': 'unavailable',
            },
        )
