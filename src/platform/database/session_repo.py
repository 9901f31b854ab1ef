from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StoreError


SessionFactory = Callable[..., AsyncContextManager[AsyncSession]]

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


def fits_bigint(*values: int) -> bool:
    """Ids outside the BIGINT range cannot match any row"""
    return all(BIGINT_MIN <= value <= BIGINT_MAX for value in values)


class SessionRepo:
    """
    Base for SQLAlchemy repositories.

    Driver and pool failures (including pool checkout timeouts) leave the
    repository as StoreError; nothing is retried here.
    """

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(description=str(e)) from e
