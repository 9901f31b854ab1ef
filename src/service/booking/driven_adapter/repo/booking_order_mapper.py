from typing import Any

import orjson

from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus
from src.service.booking.driven_adapter.model.booking_order_model import BookingOrderModel


def encode_booking_dates(booking_dates: list[str]) -> str:
    return orjson.dumps(list(booking_dates)).decode()


def decode_booking_dates(raw: Any) -> list[str]:
    if isinstance(raw, list):
        return raw
    return orjson.loads(raw) if raw else []


def to_entity(db_order: BookingOrderModel) -> BookingOrder:
    return BookingOrder(
        id=db_order.id,
        booking_dates=decode_booking_dates(db_order.booking_dates),
        first_name=db_order.first_name,
        last_name=db_order.last_name,
        phone_number=db_order.phone_number,
        email=db_order.email,
        product_id=db_order.product_id,
        variant_id=db_order.variant_id,
        quantity=db_order.quantity,
        shopify_checkout_id=db_order.shopify_checkout_id,
        shopify_checkout_url=db_order.shopify_checkout_url,
        status=BookingOrderStatus(db_order.status),
        created_at=db_order.created_at,
        updated_at=db_order.updated_at,
    )
