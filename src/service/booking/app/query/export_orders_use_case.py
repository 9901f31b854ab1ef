import csv
from datetime import datetime, timezone
import io
from typing import Iterable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.order_query import OrderFilter
from src.service.booking.app.interface.i_booking_order_query_repo import IBookingOrderQueryRepo
from src.service.booking.domain.entity.booking_order_entity import BookingOrder


CSV_HEADER = (
    'ID,Booking Dates,First Name,Last Name,Phone,Email,Product ID,Variant ID,'
    'Quantity,Checkout ID,Status,Created At,Updated At'
)


def _timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ''


def render_orders_csv(orders: Iterable[BookingOrder]) -> str:
    """
    One line per order under a fixed header.

    Numeric columns are written bare; every text column is quote-wrapped with
    embedded quotes doubled. Booking dates are joined with `;`.
    """
    buffer = io.StringIO()
    buffer.write(CSV_HEADER + '\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator='\n')
    for order in orders:
        writer.writerow(
            [
                order.id,
                ';'.join(order.booking_dates),
                order.first_name,
                order.last_name,
                order.phone_number,
                order.email,
                order.product_id,
                order.variant_id,
                order.quantity,
                order.shopify_checkout_id or '',
                order.status.value,
                _timestamp(order.created_at),
                _timestamp(order.updated_at),
            ]
        )
    return buffer.getvalue()


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f'booking_orders_{int(now.timestamp() * 1000)}.csv'


class ExportOrdersUseCase:
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
    async def export_orders(
        self,
        *,
        status: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> str:
        orders = await self.booking_order_query_repo.list_for_export(
            order_filter=OrderFilter(
                status=status or None, start_date=start_date, end_date=end_date
            )
        )
        return render_orders_csv(orders)
