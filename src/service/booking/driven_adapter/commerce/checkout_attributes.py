import orjson

from src.service.booking.domain.entity.booking_order_entity import BookingOrder


def build_custom_attributes(booking_order: BookingOrder) -> list[dict[str, str]]:
    """Booking details travel with the checkout as key/value attributes"""
    return [
        {'key': 'booking_dates', 'value': orjson.dumps(booking_order.booking_dates).decode()},
        {'key': 'first_name', 'value': booking_order.first_name},
        {'key': 'last_name', 'value': booking_order.last_name},
        {'key': 'phone_number', 'value': booking_order.phone_number},
        {'key': 'email', 'value': booking_order.email},
    ]
