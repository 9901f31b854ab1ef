from abc import ABC, abstractmethod
from typing import Any

from src.service.booking.domain.entity.date_range_entity import DateRange


class IDateRangeCommandRepo(ABC):
    """Writes are scoped by both product_id and the date range id"""

    @abstractmethod
    async def create(self, *, date_range: DateRange) -> DateRange:
        pass

    @abstractmethod
    async def update(self, *, product_id: int, date_id: int, patch: dict[str, Any]) -> bool:
        """
        Apply a partial update

        Returns:
            False when no row matched
        """
        pass

    @abstractmethod
    async def delete(self, *, product_id: int, date_id: int) -> bool:
        pass
