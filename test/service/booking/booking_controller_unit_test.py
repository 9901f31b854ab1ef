"""
HTTP tests for the booking, order and admin routers

Use cases are replaced through app.dependency_overrides, so these tests exercise
routing, request parsing, status codes and the response envelope only.
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    ADMIN_BOOKINGS,
    ADMIN_PRODUCT_DATES,
    ADMIN_PRODUCTS,
    BOOKING_CREATE,
    BOOKING_GET,
    BOOKING_STATUS,
    ORDER_DELETE,
    ORDER_EXPORT,
    ORDER_LIST,
)
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.create_date_range_use_case import CreateDateRangeUseCase
from src.service.booking.app.command.delete_order_use_case import DeleteOrderUseCase
from src.service.booking.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.booking.app.query.export_orders_use_case import ExportOrdersUseCase
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.list_catalog_products_use_case import (
    ListCatalogProductsUseCase,
)
from src.service.booking.app.query.list_orders_use_case import ListOrdersUseCase
from src.service.booking.domain.entity.date_range_entity import DateRange


BOOKING_PAYLOAD = {
    'booking_dates': ['2025-02-01', '2025-02-02'],
    'first_name': 'John',
    'last_name': 'Doe',
    'phone_number': '+1234567890',
    'email': 'john@example.com',
    'product_id': 123456789,
    'variant_id': 987654321,
}


@pytest.mark.unit
class TestBookingRoutes:
    def test_create_booking_returns_201(self, app: FastAPI, client: TestClient) -> None:
        """
        Given: Gateway not configured
        When: POST /api/booking/create with a valid body
        Then: 201 with booking_id and checkout_url null
        """
        # Arrange
        use_case = Mock()
        use_case.create_booking = AsyncMock(
            return_value={
                'booking_id': 1,
                'checkout_url': None,
                'checkout_id': None,
                'product_id': 123456789,
                'variant_id': 987654321,
                'product_info': None,
            }
        )
        app.dependency_overrides[CreateBookingUseCase.depends] = lambda: use_case

        # Act
        response = client.post(BOOKING_CREATE, json=BOOKING_PAYLOAD)

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['message'] == 'Booking created successfully'
        assert body['data']['booking_id'] == 1
        assert body['data']['checkout_url'] is None
        assert use_case.create_booking.call_args.kwargs['quantity'] is None

    def test_domain_validation_error_envelope(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.create_booking = AsyncMock(
            side_effect=ValidationError(
                'Missing required fields', details={'required_fields': ['email']}
            )
        )
        app.dependency_overrides[CreateBookingUseCase.depends] = lambda: use_case

        response = client.post(BOOKING_CREATE, json={'first_name': 'John'})

        assert response.status_code == 400
        assert response.json() == {
            'success': False,
            'error': 'Missing required fields',
            'details': {'required_fields': ['email']},
        }

    def test_get_unknown_booking(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.get_booking = AsyncMock(side_effect=NotFoundError('Booking not found'))
        app.dependency_overrides[GetBookingUseCase.depends] = lambda: use_case

        response = client.get(BOOKING_GET.format(booking_id=99999))

        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Booking not found'}

    def test_non_integer_id_is_validation_error(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.get_booking = AsyncMock()
        app.dependency_overrides[GetBookingUseCase.depends] = lambda: use_case

        response = client.get(BOOKING_GET.format(booking_id='abc'))

        use_case.get_booking.assert_not_awaited()
        assert response.status_code == 400
        assert response.json()['error'] == 'Validation failed'

    def test_update_status(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.update_status = AsyncMock(return_value=None)
        app.dependency_overrides[UpdateBookingStatusUseCase.depends] = lambda: use_case

        response = client.put(BOOKING_STATUS.format(booking_id=5), json={'status': 'completed'})

        assert response.status_code == 200
        assert response.json()['message'] == 'Booking status updated successfully'
        use_case.update_status.assert_awaited_once_with(booking_id=5, status='completed')


@pytest.mark.unit
class TestOrderRoutes:
    def test_list_orders_passes_raw_query(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.list_orders = AsyncMock(
            return_value={'orders': [], 'pagination': {'current_page': 1, 'per_page': 100}}
        )
        app.dependency_overrides[ListOrdersUseCase.depends] = lambda: use_case

        response = client.get(ORDER_LIST, params={'limit': 500, 'sort_by': 'droptable'})

        assert response.status_code == 200
        assert response.json()['data']['pagination']['per_page'] == 100
        kwargs = use_case.list_orders.call_args.kwargs
        assert kwargs['limit'] == 500
        assert kwargs['sort_by'] == 'droptable'

    def test_export_is_csv_attachment(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.export_orders = AsyncMock(return_value='ID,Booking Dates\n')
        app.dependency_overrides[ExportOrdersUseCase.depends] = lambda: use_case

        response = client.get(ORDER_EXPORT, params={'status': 'pending'})

        assert response.status_code == 200
        assert response.headers['content-type'].startswith('text/csv')
        disposition = response.headers['content-disposition']
        assert disposition.startswith('attachment; filename="booking_orders_')
        assert disposition.endswith('.csv"')
        assert response.text == 'ID,Booking Dates\n'

    def test_delete_unknown_order(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.delete_order = AsyncMock(side_effect=NotFoundError('Order not found'))
        app.dependency_overrides[DeleteOrderUseCase.depends] = lambda: use_case

        response = client.delete(ORDER_DELETE.format(order_id=99999))

        assert response.status_code == 404
        assert response.json()['error'] == 'Order not found'


@pytest.mark.unit
class TestAdminRoutes:
    def test_list_products_spreads_result(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.list_products = AsyncMock(
            return_value={
                'data': [],
                'count': 0,
                'message': 'No active products found in Shopify store',
            }
        )
        app.dependency_overrides[ListCatalogProductsUseCase.depends] = lambda: use_case

        response = client.get(ADMIN_PRODUCTS)

        assert response.json() == {
            'success': True,
            'data': [],
            'count': 0,
            'message': 'No active products found in Shopify store',
        }

    def test_create_date_range(self, app: FastAPI, client: TestClient) -> None:
        use_case = Mock()
        use_case.create_date_range = AsyncMock(
            return_value=DateRange(
                id=11, product_id=7, start_date=date(2025, 2, 1), end_date=date(2025, 2, 28)
            )
        )
        app.dependency_overrides[CreateDateRangeUseCase.depends] = lambda: use_case

        response = client.post(
            ADMIN_PRODUCT_DATES.format(product_id=7),
            json={'start_date': '2025-02-01', 'end_date': '2025-02-28', 'available_seats': 20},
        )

        assert response.status_code == 201
        assert response.json()['data'] == {'id': 11}
        kwargs = use_case.create_date_range.call_args.kwargs
        assert kwargs['product_id'] == 7
        assert kwargs['start_date'] == date(2025, 2, 1)

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get(f'{ADMIN_BOOKINGS}/nope/deeper')

        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Route not found'}
