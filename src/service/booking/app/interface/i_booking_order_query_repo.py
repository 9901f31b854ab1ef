from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Tuple

from src.service.booking.app.dto.order_query import OrderFilter, OrderListQuery
from src.service.booking.domain.entity.booking_order_entity import BookingOrder


class IBookingOrderQueryRepo(ABC):
    """Repository interface for booking order reads"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[BookingOrder]:
        pass

    @abstractmethod
    async def list_all(self) -> List[BookingOrder]:
        """All orders, most recent first"""
        pass

    @abstractmethod
    async def list_page(self, *, query: OrderListQuery) -> Tuple[List[BookingOrder], int]:
        """
        One page of filtered orders

        Returns:
            (orders on the page, total matching records)
        """
        pass

    @abstractmethod
    async def get_stats(self, *, now: datetime) -> dict[str, Any]:
        """
        Status and recency counters plus the ten most ordered products

        Returns:
            {'overview': {...}, 'top_products': [{'product_id', 'order_count'}, ...]}
        """
        pass

    @abstractmethod
    async def list_for_export(self, *, order_filter: OrderFilter) -> List[BookingOrder]:
        """Filtered orders, newest first, without pagination"""
        pass
