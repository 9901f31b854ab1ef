"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- A TestClient over the test app (lifespan not started; use dependency overrides)
- PostgreSQL fixtures for integration tests, skipped when the server is unreachable

Architecture:
- Unit tests (@pytest.mark.unit): AsyncMock repositories / gateway, no infrastructure
- Integration tests (@pytest.mark.integration): real PostgreSQL, tables truncated per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time of src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'booking_orders_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'booking_orders_test_db_{worker_id}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Small pool and a short wait so an unreachable server fails fast
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '0')
    os.environ.setdefault('DB_POOL_TIMEOUT', '5')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402

from script.setup_database import ensure_database  # noqa: E402


@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    from test.test_main import app as test_app

    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """HTTP client without lifespan; tests override use case dependencies"""
    yield TestClient(app, raise_server_exceptions=False)


# =============================================================================
# Integration fixtures (PostgreSQL)
# =============================================================================


@pytest.fixture
async def database() -> AsyncGenerator[Any, None]:
    """
    Fresh tables for one integration test.

    Skips the test when PostgreSQL cannot be reached.
    """
    from src.platform.database.orm_db_setting import (
        Database,
        create_db_and_tables,
        dispose_engine,
        get_engine,
    )

    try:
        await ensure_database()
    except Exception as e:
        pytest.skip(f'PostgreSQL not reachable: {e}')

    await create_db_and_tables()
    async with get_engine().begin() as conn:
        await conn.execute(
            text('TRUNCATE booking_orders, product_dates, products RESTART IDENTITY')
        )

    yield Database()

    await dispose_engine()
