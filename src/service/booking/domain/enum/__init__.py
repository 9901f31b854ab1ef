"""Booking Domain Enums"""

from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus
from src.service.booking.domain.enum.checkout_policy import CheckoutPolicy

__all__ = ['BookingOrderStatus', 'CheckoutPolicy']
