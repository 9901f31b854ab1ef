from datetime import datetime
import re
from typing import Any, List, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

REQUIRED_FIELDS = [
    'booking_dates',
    'first_name',
    'last_name',
    'phone_number',
    'email',
    'product_id',
    'variant_id',
]

# Column widths of the booking_orders table
MAX_FIELD_LENGTHS = {
    'first_name': 100,
    'last_name': 100,
    'phone_number': 20,
    'email': 255,
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # Zero and negative ids are not valid catalog ids
    if isinstance(value, int) and not isinstance(value, bool):
        return value <= 0
    return False


@attrs.define
class BookingOrder:
    booking_dates: List[str]
    first_name: str
    last_name: str
    phone_number: str
    email: str
    product_id: int
    variant_id: int
    quantity: int = 1
    shopify_checkout_id: Optional[str] = None
    shopify_checkout_url: Optional[str] = None
    status: BookingOrderStatus = BookingOrderStatus.PENDING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        booking_dates: Any,
        first_name: Optional[str],
        last_name: Optional[str],
        phone_number: Optional[str],
        email: Optional[str],
        product_id: Optional[int],
        variant_id: Optional[int],
        quantity: Optional[int] = None,
    ) -> 'BookingOrder':
        fields = {
            'booking_dates': booking_dates,
            'first_name': first_name,
            'last_name': last_name,
            'phone_number': phone_number,
            'email': email,
            'product_id': product_id,
            'variant_id': variant_id,
        }
        if any(_is_blank(value) for value in fields.values()):
            raise ValidationError(
                'Missing required fields', details={'required_fields': REQUIRED_FIELDS}
            )

        if not EMAIL_PATTERN.fullmatch(str(email)):
            raise ValidationError('Invalid email format')

        # A bare string is a sequence too, but not a list of dates
        if not isinstance(booking_dates, (list, tuple)) or len(booking_dates) == 0:
            raise ValidationError('booking_dates must be a non-empty array')

        quantity = 1 if quantity is None else quantity
        if quantity < 1:
            raise ValidationError('quantity must be at least 1')

        for name, max_length in MAX_FIELD_LENGTHS.items():
            if len(str(fields[name])) > max_length:
                raise ValidationError(f'{name} must be at most {max_length} characters')

        return cls(
            booking_dates=[str(booking_date) for booking_date in booking_dates],
            first_name=str(first_name),
            last_name=str(last_name),
            phone_number=str(phone_number),
            email=str(email),
            product_id=int(product_id),  # type: ignore[arg-type]
            variant_id=int(variant_id),  # type: ignore[arg-type]
            quantity=quantity,
            status=BookingOrderStatus.PENDING,
        )

    def with_checkout(
        self, *, checkout_id: Optional[str], checkout_url: Optional[str]
    ) -> 'BookingOrder':
        return attrs.evolve(
            self, shopify_checkout_id=checkout_id, shopify_checkout_url=checkout_url
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'booking_dates': list(self.booking_dates),
            'first_name': self.first_name,
            'last_name': self.last_name,
            'phone_number': self.phone_number,
            'email': self.email,
            'product_id': self.product_id,
            'variant_id': self.variant_id,
            'quantity': self.quantity,
            'shopify_checkout_id': self.shopify_checkout_id,
            'shopify_checkout_url': self.shopify_checkout_url,
            'status': self.status.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


def parse_status(status: Any) -> BookingOrderStatus:
    try:
        return BookingOrderStatus(status)
    except ValueError:
        raise ValidationError('Invalid status. Must be: pending, completed, or cancelled')
