from datetime import datetime, timezone
from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_query_repo import IBookingOrderQueryRepo


class GetOrderStatsUseCase:
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
    async def get_stats(self) -> dict[str, Any]:
        return await self.booking_order_query_repo.get_stats(now=datetime.now(timezone.utc))
