"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one pooled engine per event loop
2. Base: declarative base shared by every table model
3. create_db_and_tables: idempotent schema setup, called once at startup
4. Database: session factory handed to repositories through the DI container

Pool policy:
- At most DB_POOL_SIZE + DB_POOL_MAX_OVERFLOW connections (10 by default)
- Requests beyond the bound wait up to DB_POOL_TIMEOUT seconds, then fail
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Keeps the engine bound to the running event loop.

    asyncpg connections cannot cross loops, so a loop change (test runners,
    reloaders) drops the old engine and builds a new one.
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, replacing engine')
            self._engine = self._create_engine()
            self._session_maker = None
            self._loop = current_loop
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    @staticmethod
    def _create_engine() -> AsyncEngine:
        return create_async_engine(
            settings.DATABASE_URL_ASYNC,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Schema setup and reachability
# =============================================================================


async def create_db_and_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create tables and indexes that do not exist yet; safe to run from many instances"""
    # Register every model on Base.metadata
    import src.service.booking.driven_adapter.model  # noqa: F401

    current_engine = engine or get_engine()
    try:
        async with current_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        error_msg = str(e).lower()
        if any(
            keyword in error_msg
            for keyword in ['already exists', 'duplicate key', 'unique constraint']
        ):
            # Another instance won the race between the existence check and CREATE
            Logger.base.info('Tables already exist, skipping creation')
        else:
            Logger.base.error(f'Error creating tables: {e}')
            raise


async def ping_database() -> bool:
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text('SELECT 1'))
        return True
    except Exception as e:
        Logger.base.warning(f'⚠️ [DB] Connection test failed: {e}')
        return False


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """Session provider injected into repositories as `session_factory`"""

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session_maker = get_session_maker()
        async with session_maker() as session:
            yield session
