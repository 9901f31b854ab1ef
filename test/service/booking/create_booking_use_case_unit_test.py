"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Gateway not configured: booking saved without checkout, product auto-registered
2. Lenient policy: checkout failure is logged, booking still created
3. Strict policy: invalid product/variant or checkout failure aborts before any write
4. Validation failures never touch repositories or the gateway
"""

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.exception.exceptions import GatewayError, ValidationError
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.dto.gateway_result import (
    CheckoutResult,
    GatewayFailureKind,
    GatewayResult,
)
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.enum.checkout_policy import CheckoutPolicy


REQUEST: dict[str, Any] = {
    'booking_dates': ['2025-02-01', '2025-02-02'],
    'first_name': 'John',
    'last_name': 'Doe',
    'phone_number': '+1234567890',
    'email': 'john@example.com',
    'product_id': 123456789,
    'variant_id': 987654321,
}


async def _saved(*, booking_order: BookingOrder) -> BookingOrder:
    booking_order.id = 1
    return booking_order


@pytest.mark.unit
class TestCreateBooking:
    @pytest.fixture
    def mock_booking_order_command_repo(self) -> Mock:
        repo = AsyncMock()
        repo.create = AsyncMock(side_effect=_saved)
        return repo

    @pytest.fixture
    def mock_product_command_repo(self) -> Mock:
        return AsyncMock()

    @pytest.fixture
    def mock_commerce_gateway(self) -> Mock:
        gateway = AsyncMock()
        gateway.is_configured = Mock(return_value=True)
        gateway.create_checkout = AsyncMock(
            return_value=CheckoutResult(
                success=True,
                checkout_id='c-1',
                checkout_url='https://shop.example.com/checkouts/c-1',
            )
        )
        gateway.get_product = AsyncMock(
            return_value=GatewayResult.ok({'id': 123456789, 'title': 'Guided Tour'})
        )
        gateway.get_variant = AsyncMock(
            return_value=GatewayResult.ok({'id': 987654321, 'title': 'Morning', 'price': '49.00'})
        )
        return gateway

    def _use_case(
        self,
        booking_order_command_repo: Mock,
        product_command_repo: Mock,
        commerce_gateway: Mock,
        policy: CheckoutPolicy = CheckoutPolicy.LENIENT,
    ) -> CreateBookingUseCase:
        return CreateBookingUseCase(
            booking_order_command_repo=booking_order_command_repo,
            product_command_repo=product_command_repo,
            commerce_gateway=commerce_gateway,
            checkout_policy=policy,
        )

    @pytest.mark.asyncio
    async def test_unconfigured_gateway_creates_booking_without_checkout(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        """
        Given: Shopify credentials are not configured
        When: A valid booking is submitted
        Then:
          - Booking is stored pending with no checkout
          - The product is registered if absent
          - The gateway is never asked for a checkout
        """
        # Arrange
        mock_commerce_gateway.is_configured = Mock(return_value=False)
        use_case = self._use_case(
            mock_booking_order_command_repo, mock_product_command_repo, mock_commerce_gateway
        )

        # Act
        result = await use_case.create_booking(**REQUEST)

        # Assert
        assert result['booking_id'] == 1
        assert result['checkout_url'] is None
        assert result['checkout_id'] is None
        assert result['product_info'] is None
        mock_commerce_gateway.create_checkout.assert_not_awaited()

        registered = mock_product_command_repo.register_if_absent.call_args.kwargs['product']
        assert registered.product_id == 123456789
        assert registered.product_name == 'Product 123456789'

        saved = mock_booking_order_command_repo.create.call_args.kwargs['booking_order']
        assert saved.status.value == 'pending'
        assert saved.quantity == 1

    @pytest.mark.asyncio
    async def test_lenient_success_stores_checkout(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        use_case = self._use_case(
            mock_booking_order_command_repo, mock_product_command_repo, mock_commerce_gateway
        )

        result = await use_case.create_booking(**REQUEST)

        assert result['checkout_url'] == 'https://shop.example.com/checkouts/c-1'
        assert result['checkout_id'] == 'c-1'
        mock_commerce_gateway.get_product.assert_not_awaited()
        mock_product_command_repo.register_if_absent.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_lenient_checkout_failure_still_creates_booking(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        """
        Given: Lenient policy and Shopify times out
        When: A valid booking is submitted
        Then: Booking is created with checkout_url null
        """
        # Arrange
        mock_commerce_gateway.create_checkout = AsyncMock(
            return_value=CheckoutResult(
                success=False,
                error='Request to Shopify timed out after 5.0s',
                failure_kind=GatewayFailureKind.NETWORK,
            )
        )
        use_case = self._use_case(
            mock_booking_order_command_repo, mock_product_command_repo, mock_commerce_gateway
        )

        # Act
        result = await use_case.create_booking(**REQUEST)

        # Assert
        assert result['booking_id'] == 1
        assert result['checkout_url'] is None
        mock_booking_order_command_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_strict_success_returns_product_info(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        use_case = self._use_case(
            mock_booking_order_command_repo,
            mock_product_command_repo,
            mock_commerce_gateway,
            CheckoutPolicy.STRICT,
        )

        result = await use_case.create_booking(**REQUEST)

        assert result['product_info'] == {
            'product_title': 'Guided Tour',
            'variant_title': 'Morning',
            'price': '49.00',
        }
        assert result['checkout_url'] == 'https://shop.example.com/checkouts/c-1'
        mock_product_command_repo.register_if_absent.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_strict_invalid_product_is_rejected_before_any_write(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        """
        Given: Strict policy and the product id does not exist in Shopify
        When: A booking is submitted
        Then: ValidationError 'Invalid product ID', no checkout, no insert
        """
        # Arrange
        mock_commerce_gateway.get_product = AsyncMock(
            return_value=GatewayResult.fail(
                GatewayFailureKind.HTTP, 'Product with ID "123456789" not found', status_code=404
            )
        )
        use_case = self._use_case(
            mock_booking_order_command_repo,
            mock_product_command_repo,
            mock_commerce_gateway,
            CheckoutPolicy.STRICT,
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.create_booking(**REQUEST)

        assert exc_info.value.message == 'Invalid product ID'
        assert 'not found' in exc_info.value.details
        mock_commerce_gateway.create_checkout.assert_not_awaited()
        mock_booking_order_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_strict_invalid_variant_is_rejected(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        mock_commerce_gateway.get_variant = AsyncMock(
            return_value=GatewayResult.fail(GatewayFailureKind.HTTP, 'gone', status_code=404)
        )
        use_case = self._use_case(
            mock_booking_order_command_repo,
            mock_product_command_repo,
            mock_commerce_gateway,
            CheckoutPolicy.STRICT,
        )

        with pytest.raises(ValidationError, match='Invalid variant ID'):
            await use_case.create_booking(**REQUEST)

        mock_booking_order_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_strict_checkout_failure_raises_gateway_error(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        mock_commerce_gateway.create_checkout = AsyncMock(
            return_value=CheckoutResult(
                success=False, error='Checkout blocked', failure_kind=GatewayFailureKind.HTTP
            )
        )
        use_case = self._use_case(
            mock_booking_order_command_repo,
            mock_product_command_repo,
            mock_commerce_gateway,
            CheckoutPolicy.STRICT,
        )

        with pytest.raises(GatewayError) as exc_info:
            await use_case.create_booking(**REQUEST)

        assert exc_info.value.message == 'Failed to create Shopify checkout'
        assert exc_info.value.status_code == 500
        assert exc_info.value.details == 'Checkout blocked'
        mock_booking_order_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_validation_failure_has_no_side_effects(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        use_case = self._use_case(
            mock_booking_order_command_repo, mock_product_command_repo, mock_commerce_gateway
        )

        with pytest.raises(ValidationError, match='Missing required fields'):
            await use_case.create_booking(**(REQUEST | {'email': None}))

        mock_commerce_gateway.create_checkout.assert_not_awaited()
        mock_product_command_repo.register_if_absent.assert_not_awaited()
        mock_booking_order_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_phone_wider_than_column_creates_no_checkout(
        self,
        mock_booking_order_command_repo: Mock,
        mock_product_command_repo: Mock,
        mock_commerce_gateway: Mock,
    ) -> None:
        """
        Given: A configured gateway
        When: The phone number is wider than the stored column
        Then: The request is rejected before a remote checkout exists
        """
        use_case = self._use_case(
            mock_booking_order_command_repo, mock_product_command_repo, mock_commerce_gateway
        )

        with pytest.raises(ValidationError, match='phone_number must be at most 20 characters'):
            await use_case.create_booking(
                **(REQUEST | {'phone_number': '+1 (555) 010-0000 ext. 1234'})
            )

        mock_commerce_gateway.create_checkout.assert_not_awaited()
        mock_booking_order_command_repo.create.assert_not_awaited()
