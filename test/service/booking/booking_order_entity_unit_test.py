"""
Unit tests for BookingOrder.create

Test Focus:
1. Validation order: missing fields -> email -> booking_dates -> quantity -> column widths
2. Defaults: quantity 1, status pending
3. parse_status accepts only the three known statuses
"""

from typing import Any

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.booking.domain.entity.booking_order_entity import (
    REQUIRED_FIELDS,
    BookingOrder,
    parse_status,
)
from src.service.booking.domain.enum.booking_order_status import BookingOrderStatus


def _fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        'booking_dates': ['2025-02-01', '2025-02-02'],
        'first_name': 'John',
        'last_name': 'Doe',
        'phone_number': '+1234567890',
        'email': 'john@example.com',
        'product_id': 123456789,
        'variant_id': 987654321,
    }
    return fields | overrides


@pytest.mark.unit
class TestBookingOrderCreate:
    def test_valid_request_defaults_to_pending_with_quantity_one(self) -> None:
        booking_order = BookingOrder.create(**_fields())

        assert booking_order.status == BookingOrderStatus.PENDING
        assert booking_order.quantity == 1
        assert booking_order.booking_dates == ['2025-02-01', '2025-02-02']
        assert booking_order.id is None

    @pytest.mark.parametrize('field', REQUIRED_FIELDS)
    def test_missing_field_is_rejected_with_required_list(self, field: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            BookingOrder.create(**_fields(**{field: None}))

        assert exc_info.value.message == 'Missing required fields'
        assert exc_info.value.details == {'required_fields': REQUIRED_FIELDS}

    def test_blank_string_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError, match='Missing required fields'):
            BookingOrder.create(**_fields(last_name='   '))

    @pytest.mark.parametrize('field', ['product_id', 'variant_id'])
    @pytest.mark.parametrize('value', [0, -1])
    def test_non_positive_id_counts_as_missing(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError, match='Missing required fields'):
            BookingOrder.create(**_fields(**{field: value}))

    @pytest.mark.parametrize(
        'email',
        ['not-an-email', 'a@b', 'a b@c.com', '@example.com', 'john@example.com\n'],
    )
    def test_invalid_email(self, email: str) -> None:
        with pytest.raises(ValidationError, match='Invalid email format'):
            BookingOrder.create(**_fields(email=email))

    @pytest.mark.parametrize('booking_dates', [[], '2025-02-01', {'date': '2025-02-01'}])
    def test_booking_dates_must_be_non_empty_array(self, booking_dates: Any) -> None:
        with pytest.raises(ValidationError, match='booking_dates must be a non-empty array'):
            BookingOrder.create(**_fields(booking_dates=booking_dates))

    def test_missing_field_is_reported_before_bad_email(self) -> None:
        with pytest.raises(ValidationError, match='Missing required fields'):
            BookingOrder.create(**_fields(email='bad', first_name=None))

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_quantity_below_one(self, quantity: int) -> None:
        with pytest.raises(ValidationError, match='quantity must be at least 1'):
            BookingOrder.create(**_fields(quantity=quantity))

    @pytest.mark.parametrize(
        'field, value, max_length',
        [
            ('first_name', 'J' * 101, 100),
            ('last_name', 'D' * 101, 100),
            ('phone_number', '+1 (555) 010-0000 ext. 1234', 20),
            ('email', 'j' * 250 + '@example.com', 255),
        ],
    )
    def test_value_wider_than_column_is_rejected(
        self, field: str, value: str, max_length: int
    ) -> None:
        with pytest.raises(
            ValidationError, match=f'{field} must be at most {max_length} characters'
        ):
            BookingOrder.create(**_fields(**{field: value}))

    def test_values_at_column_width_are_accepted(self) -> None:
        booking_order = BookingOrder.create(
            **_fields(first_name='J' * 100, phone_number='+' + '1' * 19)
        )

        assert len(booking_order.first_name) == 100
        assert len(booking_order.phone_number) == 20

    def test_with_checkout_keeps_other_fields(self) -> None:
        booking_order = BookingOrder.create(**_fields(quantity=2))

        updated = booking_order.with_checkout(
            checkout_id='c1', checkout_url='https://shop.example/checkout/c1'
        )

        assert updated.shopify_checkout_id == 'c1'
        assert updated.shopify_checkout_url == 'https://shop.example/checkout/c1'
        assert updated.quantity == 2
        assert booking_order.shopify_checkout_id is None

    def test_to_dict_without_timestamps(self) -> None:
        data = BookingOrder.create(**_fields()).to_dict()

        assert data['status'] == 'pending'
        assert data['created_at'] is None
        assert data['shopify_checkout_url'] is None


@pytest.mark.unit
class TestParseStatus:
    @pytest.mark.parametrize('value', ['pending', 'completed', 'cancelled'])
    def test_known_status(self, value: str) -> None:
        assert parse_status(value).value == value

    @pytest.mark.parametrize('value', ['shipped', '', None, 'PENDING'])
    def test_unknown_status(self, value: Any) -> None:
        with pytest.raises(
            ValidationError, match='Invalid status. Must be: pending, completed, or cancelled'
        ):
            parse_status(value)
