from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_date_range_query_repo import IDateRangeQueryRepo
from src.service.booking.domain.entity.date_range_entity import DateRange


class ListDateRangesUseCase:
    def __init__(self, *, date_range_query_repo: IDateRangeQueryRepo) -> None:
        self.date_range_query_repo = date_range_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        date_range_query_repo: IDateRangeQueryRepo = Depends(
            Provide[Container.date_range_query_repo]
        ),
    ) -> Self:
        return cls(date_range_query_repo=date_range_query_repo)

    @Logger.io
    async def list_date_ranges(self, *, product_id: int) -> List[DateRange]:
        return await self.date_range_query_repo.list_by_product(product_id=product_id)
