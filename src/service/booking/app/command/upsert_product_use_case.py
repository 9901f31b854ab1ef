from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.booking.domain.entity.product_entity import Product


class UpsertProductUseCase:
    def __init__(self, *, product_command_repo: IProductCommandRepo) -> None:
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_command_repo=product_command_repo)

    @Logger.io
    async def upsert_product(
        self,
        *,
        product_id: Optional[int],
        variant_id: Optional[int],
        product_name: Optional[str],
        variant_name: Optional[str] = None,
    ) -> Product:
        product = Product.create(
            product_id=product_id,
            variant_id=variant_id,
            product_name=product_name,
            variant_name=variant_name,
        )
        await self.product_command_repo.upsert(product=product)
        return product
