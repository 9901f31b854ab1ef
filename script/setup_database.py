#!/usr/bin/env python3
"""
Database Setup Script
Prepare PostgreSQL for the booking backend

Features:
1. Create Database - create POSTGRES_DB when it does not exist yet
2. Create Tables - products, product_dates, booking_orders (idempotent)
3. Sample Data - two sample booking orders, skipped when their ids already exist

Notes:
- Safe to run repeatedly; nothing is dropped
- The application performs step 2 on startup as well
"""

import asyncio

from sqlalchemy import func, select, text
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.service.booking.driven_adapter.model.booking_order_model import BookingOrderModel


SAMPLE_ORDERS = [
    {
        'id': 1,
        'booking_dates': '["2024-01-15", "2024-01-16"]',
        'first_name': 'John',
        'last_name': 'Doe',
        'phone_number': '+1234567890',
        'email': 'john.doe@example.com',
        'product_id': 123456789,
        'variant_id': 987654321,
        'quantity': 1,
    },
    {
        'id': 2,
        'booking_dates': '["2024-01-20"]',
        'first_name': 'Jane',
        'last_name': 'Smith',
        'phone_number': '+1234567891',
        'email': 'jane.smith@example.com',
        'product_id': 123456789,
        'variant_id': 987654322,
        'quantity': 1,
    },
]


def _server_url(database_url: str) -> str:
    """Same server, maintenance database"""
    return f'{database_url.rsplit("/", 1)[0]}/postgres'


async def ensure_database() -> None:
    admin_engine = create_async_engine(
        _server_url(settings.DATABASE_URL_ASYNC), isolation_level='AUTOCOMMIT'
    )
    try:
        async with admin_engine.connect() as conn:
            exists = await conn.scalar(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if exists:
                Logger.base.info(f'✅ Database "{settings.POSTGRES_DB}" already exists')
                return
            await conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
            Logger.base.info(f'✅ Database "{settings.POSTGRES_DB}" created')
    finally:
        await admin_engine.dispose()


async def insert_sample_data() -> int:
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.execute(
            insert(BookingOrderModel)
            .values(SAMPLE_ORDERS)
            .on_conflict_do_nothing(index_elements=[BookingOrderModel.id])
        )
        # Explicit ids bypass the serial sequence; move it past them
        await conn.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('booking_orders', 'id'), "
                'GREATEST((SELECT MAX(id) FROM booking_orders), 1))'
            )
        )
        total = await conn.execute(select(func.count()).select_from(BookingOrderModel))
        return total.scalar_one()


async def main() -> None:
    try:
        await ensure_database()
        await create_db_and_tables()
        Logger.base.info('✅ Tables ensured')

        total = await insert_sample_data()
        Logger.base.info(f'✅ Database setup complete! Total records: {total}')
    except Exception as e:
        Logger.base.error(f'❌ Database setup failed: {e}')
        Logger.base.info(
            '💡 Check POSTGRES_SERVER / POSTGRES_PORT / POSTGRES_USER / POSTGRES_PASSWORD '
            'in .env and make sure PostgreSQL is running'
        )
        raise
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
