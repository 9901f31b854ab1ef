from typing import Any, Iterable, List

from sqlalchemy import case, func, select

from src.platform.database.session_repo import SessionRepo, fits_bigint
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_query_repo import IDateRangeQueryRepo
from src.service.booking.domain.entity.date_range_entity import DateRange
from src.service.booking.driven_adapter.model.date_range_model import DateRangeModel
from src.service.booking.driven_adapter.repo.date_range_mapper import to_entity


class DateRangeQueryRepoImpl(SessionRepo, IDateRangeQueryRepo):
    @Logger.io
    async def list_by_product(self, *, product_id: int) -> List[DateRange]:
        if not fits_bigint(product_id):
            return []
        async with self._get_session() as session:
            result = await session.execute(
                select(DateRangeModel)
                .where(DateRangeModel.product_id == product_id)
                .order_by(DateRangeModel.start_date.asc(), DateRangeModel.id.asc())
            )
            return [to_entity(db_range) for db_range in result.scalars().all()]

    @Logger.io
    async def get_stats_by_product(
        self, *, product_ids: Iterable[int]
    ) -> dict[int, dict[str, Any]]:
        ids = list(product_ids)
        if not ids:
            return {}

        stmt = (
            select(
                DateRangeModel.product_id,
                func.count(DateRangeModel.id).label('total_ranges'),
                func.count(case((DateRangeModel.is_active.is_(True), 1))).label('active_ranges'),
                func.coalesce(func.sum(DateRangeModel.available_seats), 0).label(
                    'total_available_seats'
                ),
                func.coalesce(func.sum(DateRangeModel.booked_seats), 0).label(
                    'total_booked_seats'
                ),
                func.min(DateRangeModel.start_date).label('earliest_date'),
                func.max(DateRangeModel.end_date).label('latest_date'),
            )
            .where(DateRangeModel.product_id.in_(ids))
            .group_by(DateRangeModel.product_id)
        )
        async with self._get_session() as session:
            rows = (await session.execute(stmt)).mappings().all()

        return {
            row['product_id']: {
                'total_ranges': row['total_ranges'],
                'active_ranges': row['active_ranges'],
                'total_available_seats': int(row['total_available_seats']),
                'total_booked_seats': int(row['total_booked_seats']),
                'earliest_date': row['earliest_date'].isoformat() if row['earliest_date'] else None,
                'latest_date': row['latest_date'].isoformat() if row['latest_date'] else None,
            }
            for row in rows
        }
