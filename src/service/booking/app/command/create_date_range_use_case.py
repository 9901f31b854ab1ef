from datetime import date
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_command_repo import IDateRangeCommandRepo
from src.service.booking.domain.entity.date_range_entity import DateRange


class CreateDateRangeUseCase:
    def __init__(self, *, date_range_command_repo: IDateRangeCommandRepo) -> None:
        self.date_range_command_repo = date_range_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        date_range_command_repo: IDateRangeCommandRepo = Depends(
            Provide[Container.date_range_command_repo]
        ),
    ) -> Self:
        return cls(date_range_command_repo=date_range_command_repo)

    @Logger.io
    async def create_date_range(
        self,
        *,
        product_id: int,
        start_date: Optional[date],
        end_date: Optional[date],
        available_seats: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> DateRange:
        date_range = DateRange.create(
            product_id=product_id,
            start_date=start_date,
            end_date=end_date,
            available_seats=available_seats,
            is_active=is_active,
        )
        return await self.date_range_command_repo.create(date_range=date_range)
