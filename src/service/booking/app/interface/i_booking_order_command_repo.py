from abc import ABC, abstractmethod

from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus


class IBookingOrderCommandRepo(ABC):
    """Repository interface for booking order writes; one statement per call"""

    @abstractmethod
    async def create(self, *, booking_order: BookingOrder) -> BookingOrder:
        """
        Insert a booking order

        Returns:
            BookingOrder with generated id and timestamps
        """
        pass

    @abstractmethod
    async def update_status(self, *, booking_id: int, status: BookingOrderStatus) -> bool:
        """
        Set status and updated_at in a single UPDATE

        Returns:
            False when no row matched booking_id
        """
        pass

    @abstractmethod
    async def delete(self, *, order_id: int) -> bool:
        pass
