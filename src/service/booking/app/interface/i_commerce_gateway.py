from abc import ABC, abstractmethod

from src.service.booking.app.dto.gateway_result import CheckoutResult, GatewayResult
from src.service.booking.domain.entity.booking_order_entity import BookingOrder


class ICommerceGateway(ABC):
    """
    Commerce platform boundary.

    None of the methods raise for remote problems: every failure comes back
    as an unsuccessful result carrying one error string.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        pass

    @abstractmethod
    async def get_product(self, *, product_id: int) -> GatewayResult:
        """data: product dict in the admin REST shape"""
        pass

    @abstractmethod
    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        """data: variant dict in the admin REST shape"""
        pass

    @abstractmethod
    async def get_all_products(self) -> GatewayResult:
        """data: list of active product dicts"""
        pass
