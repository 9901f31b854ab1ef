from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_command_repo import (
    IBookingOrderCommandRepo,
)
from src.service.booking.domain.entity.booking_order_entity import parse_status


class UpdateBookingStatusUseCase:
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
    async def update_status(self, *, booking_id: int, status: Any) -> None:
        new_status = parse_status(status)
        updated = await self.booking_order_command_repo.update_status(
            booking_id=booking_id, status=new_status
        )
        if not updated:
            raise NotFoundError('Booking not found')
