from abc import ABC, abstractmethod

from src.service.booking.app.dto.gateway_result import CheckoutResult
from src.service.booking.domain.entity.booking_order_entity import BookingOrder


class ICheckoutCreator(ABC):
    """One way of turning a booking into a hosted checkout on the commerce platform"""

    @abstractmethod
    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        pass
