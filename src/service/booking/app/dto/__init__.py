"""Application layer DTOs"""

from src.service.booking.app.dto.gateway_result import (
    CheckoutResult,
    GatewayFailureKind,
    GatewayResult,
)
from src.service.booking.app.dto.order_query import OrderFilter, OrderListQuery

__all__ = [
    'CheckoutResult',
    'GatewayFailureKind',
    'GatewayResult',
    'OrderFilter',
    'OrderListQuery',
]
