from datetime import datetime
from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.order_query import OrderListQuery, build_pagination
from src.service.booking.app.interface.i_booking_order_query_repo import IBookingOrderQueryRepo


class ListOrdersUseCase:
    """Paginated, filtered order listing; bad paging and sort keys are normalized, not rejected"""

    def __init__(self, *, booking_order_query_repo: IBookingOrderQueryRepo) -> None:
        self.booking_order_query_repo = booking_order_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_order_query_repo: IBookingOrderQueryRepo = Depends(
            Provide[Container.booking_order_query_repo]
        ),
    ) -> Self:
        return cls(booking_order_query_repo=booking_order_query_repo)

    @Logger.io
    async def list_orders(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
        email: Optional[str] = None,
        product_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> dict[str, Any]:
        query = OrderListQuery.build(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            status=status,
            email=email,
            product_id=product_id,
            start_date=start_date,
            end_date=end_date,
        )
        orders, total_records = await self.booking_order_query_repo.list_page(query=query)

        return {
            'orders': [order.to_dict() for order in orders],
            'pagination': build_pagination(
                page=query.page, limit=query.limit, total_records=total_records
            ),
        }
