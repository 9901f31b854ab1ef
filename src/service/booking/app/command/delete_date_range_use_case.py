from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_command_repo import IDateRangeCommandRepo


class DeleteDateRangeUseCase:
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
    async def delete_date_range(self, *, product_id: int, date_id: int) -> None:
        deleted = await self.date_range_command_repo.delete(product_id=product_id, date_id=date_id)
        if not deleted:
            raise NotFoundError('Product date range not found')
