from datetime import datetime, timedelta
from typing import Any, List, Optional, Tuple

from sqlalchemy import Select, case, func, select
from sqlalchemy.sql.elements import ColumnElement

from src.platform.database.session_repo import SessionRepo, fits_bigint
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.order_query import OrderFilter, OrderListQuery, SORTABLE_COLUMNS
from src.service.booking.app.interface.i_booking_order_query_repo import IBookingOrderQueryRepo
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus
from src.service.booking.driven_adapter.model.booking_order_model import BookingOrderModel
from src.service.booking.driven_adapter.repo.booking_order_mapper import to_entity


TOP_PRODUCTS_LIMIT = 10


def build_filter_conditions(order_filter: OrderFilter) -> List[ColumnElement[bool]]:
    conditions: List[ColumnElement[bool]] = []
    if order_filter.status:
        conditions.append(BookingOrderModel.status == order_filter.status)
    if order_filter.email:
        conditions.append(BookingOrderModel.email.contains(order_filter.email, autoescape=True))
    if order_filter.product_id is not None:
        conditions.append(BookingOrderModel.product_id == order_filter.product_id)
    if order_filter.start_date is not None:
        conditions.append(BookingOrderModel.created_at >= order_filter.start_date)
    if order_filter.end_date is not None:
        conditions.append(BookingOrderModel.created_at <= order_filter.end_date)
    return conditions


def build_order_page_statement(query: OrderListQuery) -> Select[Tuple[BookingOrderModel]]:
    # sort_by is already normalized; the column lookup is restricted to the allow-list anyway
    column_name = query.sort_by if query.sort_by in SORTABLE_COLUMNS else 'created_at'
    column = getattr(BookingOrderModel, column_name)
    order_by = column.asc() if query.sort_order == 'ASC' else column.desc()
    return (
        select(BookingOrderModel)
        .where(*build_filter_conditions(query.filter))
        .order_by(order_by)
        .limit(query.limit)
        .offset(query.offset)
    )


def build_order_count_statement(order_filter: OrderFilter) -> Select[Tuple[int]]:
    return (
        select(func.count())
        .select_from(BookingOrderModel)
        .where(*build_filter_conditions(order_filter))
    )


def _count_when(condition: ColumnElement[bool]) -> Any:
    return func.count(case((condition, 1)))


class BookingOrderQueryRepoImpl(SessionRepo, IBookingOrderQueryRepo):
    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[BookingOrder]:
        if not fits_bigint(booking_id):
            return None
        async with self._get_session() as session:
            db_order = await session.get(BookingOrderModel, booking_id)
            return to_entity(db_order) if db_order else None

    @Logger.io
    async def list_all(self) -> List[BookingOrder]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingOrderModel).order_by(BookingOrderModel.created_at.desc())
            )
            return [to_entity(db_order) for db_order in result.scalars().all()]

    @Logger.io
    async def list_page(self, *, query: OrderListQuery) -> Tuple[List[BookingOrder], int]:
        async with self._get_session() as session:
            total = (await session.execute(build_order_count_statement(query.filter))).scalar_one()
            result = await session.execute(build_order_page_statement(query))
            return [to_entity(db_order) for db_order in result.scalars().all()], total

    @Logger.io
    async def get_stats(self, *, now: datetime) -> dict[str, Any]:
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        created_at = BookingOrderModel.created_at
        status = BookingOrderModel.status

        overview_stmt = select(
            func.count().label('total_orders'),
            _count_when(status == BookingOrderStatus.PENDING.value).label('pending_orders'),
            _count_when(status == BookingOrderStatus.COMPLETED.value).label('completed_orders'),
            _count_when(status == BookingOrderStatus.CANCELLED.value).label('cancelled_orders'),
            _count_when(created_at >= today_start).label('today_orders'),
            _count_when(created_at >= now - timedelta(days=7)).label('week_orders'),
            _count_when(created_at >= now - timedelta(days=30)).label('month_orders'),
        ).select_from(BookingOrderModel)

        order_count = func.count().label('order_count')
        top_products_stmt = (
            select(BookingOrderModel.product_id, order_count)
            .group_by(BookingOrderModel.product_id)
            .order_by(order_count.desc())
            .limit(TOP_PRODUCTS_LIMIT)
        )

        async with self._get_session() as session:
            overview = (await session.execute(overview_stmt)).mappings().one()
            top_products = (await session.execute(top_products_stmt)).mappings().all()

        return {
            'overview': dict(overview),
            'top_products': [dict(row) for row in top_products],
        }

    @Logger.io
    async def list_for_export(self, *, order_filter: OrderFilter) -> List[BookingOrder]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingOrderModel)
                .where(*build_filter_conditions(order_filter))
                .order_by(BookingOrderModel.created_at.desc())
            )
            return [to_entity(db_order) for db_order in result.scalars().all()]
