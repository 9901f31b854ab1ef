from datetime import date
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_command_repo import IDateRangeCommandRepo
from src.service.booking.domain.entity.date_range_entity import build_date_range_patch


class UpdateDateRangeUseCase:
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
    async def update_date_range(
        self,
        *,
        product_id: int,
        date_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        available_seats: Optional[int] = None,
        booked_seats: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        patch = build_date_range_patch(
            start_date=start_date,
            end_date=end_date,
            available_seats=available_seats,
            booked_seats=booked_seats,
            is_active=is_active,
        )
        updated = await self.date_range_command_repo.update(
            product_id=product_id, date_id=date_id, patch=patch
        )
        if not updated:
            raise NotFoundError('Product date range not found')
