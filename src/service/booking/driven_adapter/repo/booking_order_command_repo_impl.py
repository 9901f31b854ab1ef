from sqlalchemy import delete, update
from sqlalchemy.sql import func

from src.platform.database.session_repo import SessionRepo, fits_bigint
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_command_repo import (
    IBookingOrderCommandRepo,
)
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus
from src.service.booking.driven_adapter.model.booking_order_model import BookingOrderModel
from src.service.booking.driven_adapter.repo.booking_order_mapper import (
    encode_booking_dates,
    to_entity,
)


class BookingOrderCommandRepoImpl(SessionRepo, IBookingOrderCommandRepo):
    @Logger.io
    async def create(self, *, booking_order: BookingOrder) -> BookingOrder:
        async with self._get_session() as session:
            db_order = BookingOrderModel(
                booking_dates=encode_booking_dates(booking_order.booking_dates),
                first_name=booking_order.first_name,
                last_name=booking_order.last_name,
                phone_number=booking_order.phone_number,
                email=booking_order.email,
                product_id=booking_order.product_id,
                variant_id=booking_order.variant_id,
                quantity=booking_order.quantity,
                shopify_checkout_id=booking_order.shopify_checkout_id,
                shopify_checkout_url=booking_order.shopify_checkout_url,
                status=booking_order.status.value,
            )
            session.add(db_order)
            await session.commit()
            await session.refresh(db_order)

            return to_entity(db_order)

    @Logger.io
    async def update_status(self, *, booking_id: int, status: BookingOrderStatus) -> bool:
        if not fits_bigint(booking_id):
            return False
        async with self._get_session() as session:
            result = await session.execute(
                update(BookingOrderModel)
                .where(BookingOrderModel.id == booking_id)
                .values(status=status.value, updated_at=func.now())
            )
            await session.commit()
            # PostgreSQL reports matched rows, so repeating the same status still counts
            return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def delete(self, *, order_id: int) -> bool:
        if not fits_bigint(order_id):
            return False
        async with self._get_session() as session:
            result = await session.execute(
                delete(BookingOrderModel).where(BookingOrderModel.id == order_id)
            )
            await session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]
