from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from src.service.booking.domain.entity.date_range_entity import DateRange


class IDateRangeQueryRepo(ABC):
    @abstractmethod
    async def list_by_product(self, *, product_id: int) -> List[DateRange]:
        """Date ranges of one product ordered by start_date ascending"""
        pass

    @abstractmethod
    async def get_stats_by_product(
        self, *, product_ids: Iterable[int]
    ) -> dict[int, dict[str, Any]]:
        """
        Aggregate date ranges per product

        Returns:
            product_id -> {total_ranges, active_ranges, total_available_seats,
            total_booked_seats, earliest_date, latest_date}; products without
            rows are absent
        """
        pass
