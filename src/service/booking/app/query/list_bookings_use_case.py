from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_query_repo import IBookingOrderQueryRepo
from src.service.booking.domain.entity.booking_order_entity import BookingOrder


class ListBookingsUseCase:
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
    async def list_bookings(self) -> List[BookingOrder]:
        return await self.booking_order_query_repo.list_all()
