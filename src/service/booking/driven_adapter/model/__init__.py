"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.booking.driven_adapter.model.booking_order_model import BookingOrderModel
from src.service.booking.driven_adapter.model.date_range_model import DateRangeModel
from src.service.booking.driven_adapter.model.product_model import ProductModel

__all__ = [
    'BookingOrderModel',
    'DateRangeModel',
    'ProductModel',
]
