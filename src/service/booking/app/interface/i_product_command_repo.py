from abc import ABC, abstractmethod

from src.service.booking.domain.entity.product_entity import Product


class IProductCommandRepo(ABC):
    @abstractmethod
    async def upsert(self, *, product: Product) -> None:
        """Insert, or overwrite variant and names when product_id already exists"""
        pass

    @abstractmethod
    async def register_if_absent(self, *, product: Product) -> bool:
        """
        Insert only when product_id is unknown

        Returns:
            True when a row was inserted
        """
        pass
