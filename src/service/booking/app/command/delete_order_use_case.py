from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_command_repo import (
    IBookingOrderCommandRepo,
)


class DeleteOrderUseCase:
    def __init__(self, *, booking_order_command_repo: IBookingOrderCommandRepo) -> None:
        self.booking_order_command_repo = booking_order_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_order_command_repo: IBookingOrderCommandRepo = Depends(
            Provide[Container.booking_order_command_repo]
        ),
    ) -> Self:
        return cls(booking_order_command_repo=booking_order_command_repo)

    @Logger.io
    async def delete_order(self, *, order_id: int) -> None:
        if not await self.booking_order_command_repo.delete(order_id=order_id):
            raise NotFoundError('Order not found')
