from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.sql import func

from src.platform.database.session_repo import SessionRepo, fits_bigint
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_command_repo import IDateRangeCommandRepo
from src.service.booking.domain.entity.date_range_entity import DateRange
from src.service.booking.driven_adapter.model.date_range_model import DateRangeModel
from src.service.booking.driven_adapter.repo.date_range_mapper import to_entity


class DateRangeCommandRepoImpl(SessionRepo, IDateRangeCommandRepo):
    @Logger.io
    async def create(self, *, date_range: DateRange) -> DateRange:
        async with self._get_session() as session:
            db_range = DateRangeModel(
                product_id=date_range.product_id,
                start_date=date_range.start_date,
                end_date=date_range.end_date,
                available_seats=date_range.available_seats,
                booked_seats=date_range.booked_seats,
                is_active=date_range.is_active,
            )
            session.add(db_range)
            await session.commit()
            await session.refresh(db_range)

            return to_entity(db_range)

    @Logger.io
    async def update(self, *, product_id: int, date_id: int, patch: dict[str, Any]) -> bool:
        if not fits_bigint(product_id, date_id):
            return False
        async with self._get_session() as session:
            result = await session.execute(
                update(DateRangeModel)
                .where(DateRangeModel.id == date_id, DateRangeModel.product_id == product_id)
                .values(**patch, updated_at=func.now())
            )
            await session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def delete(self, *, product_id: int, date_id: int) -> bool:
        if not fits_bigint(product_id, date_id):
            return False
        async with self._get_session() as session:
            result = await session.execute(
                delete(DateRangeModel).where(
                    DateRangeModel.id == date_id, DateRangeModel.product_id == product_id
                )
            )
            await session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]
