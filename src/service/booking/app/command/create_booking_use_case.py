import asyncio
from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import GatewayError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_order_command_repo import (
    IBookingOrderCommandRepo,
)
from src.service.booking.app.interface.i_commerce_gateway import ICommerceGateway
from src.service.booking.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.domain.entity.product_entity import Product
from src.service.booking.domain.enum.checkout_policy import CheckoutPolicy


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Validate the request (no side effect on failure)
    2. Commerce gateway, when configured:
       - strict: verify product and variant, then create the checkout; any failure aborts
       - lenient: create the checkout; a failure is logged and the booking goes on without it
    3. Auto-register the product when the gateway was skipped or lenient
    4. Insert the booking order as pending

    The gateway call finishes before any write, so no database connection is held
    while waiting on the network. A crash between a remote checkout and the insert
    leaves an orphaned remote checkout.
    """

    def __init__(
        self,
        *,
        booking_order_command_repo: IBookingOrderCommandRepo,
        product_command_repo: IProductCommandRepo,
        commerce_gateway: ICommerceGateway,
        checkout_policy: CheckoutPolicy = CheckoutPolicy.LENIENT,
    ) -> None:
        self.booking_order_command_repo = booking_order_command_repo
        self.product_command_repo = product_command_repo
        self.commerce_gateway = commerce_gateway
        self.checkout_policy = checkout_policy

    @classmethod
    @inject
    def depends(
        cls,
        booking_order_command_repo: IBookingOrderCommandRepo = Depends(
            Provide[Container.booking_order_command_repo]
        ),
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        commerce_gateway: ICommerceGateway = Depends(Provide[Container.commerce_gateway]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_order_command_repo=booking_order_command_repo,
            product_command_repo=product_command_repo,
            commerce_gateway=commerce_gateway,
            checkout_policy=config_service.CHECKOUT_POLICY,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        booking_dates: Any,
        first_name: Optional[str],
        last_name: Optional[str],
        phone_number: Optional[str],
        email: Optional[str],
        product_id: Optional[int],
        variant_id: Optional[int],
        quantity: Optional[int] = None,
    ) -> dict[str, Any]:
        booking_order = BookingOrder.create(
            booking_dates=booking_dates,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            email=email,
            product_id=product_id,
            variant_id=variant_id,
            quantity=quantity,
        )

        product_info: Optional[dict[str, Any]] = None
        is_strict = self.checkout_policy == CheckoutPolicy.STRICT

        if self.commerce_gateway.is_configured():
            if is_strict:
                product_info = await self._verify_catalog(booking_order)
            booking_order = await self._attach_checkout(booking_order, is_strict=is_strict)
        else:
            Logger.base.warning('⚠️ [Booking] Shopify not configured, booking without checkout')

        if not self.commerce_gateway.is_configured() or not is_strict:
            await self.product_command_repo.register_if_absent(
                product=Product(
                    product_id=booking_order.product_id,
                    variant_id=booking_order.variant_id,
                    product_name=f'Product {booking_order.product_id}',
                )
            )

        created = await self.booking_order_command_repo.create(booking_order=booking_order)

        return {
            'booking_id': created.id,
            'checkout_url': created.shopify_checkout_url,
            'checkout_id': created.shopify_checkout_id,
            'product_id': created.product_id,
            'variant_id': created.variant_id,
            'product_info': product_info,
        }

    async def _verify_catalog(self, booking_order: BookingOrder) -> dict[str, Any]:
        product_result, variant_result = await asyncio.gather(
            self.commerce_gateway.get_product(product_id=booking_order.product_id),
            self.commerce_gateway.get_variant(variant_id=booking_order.variant_id),
        )
        if not product_result.success:
            raise ValidationError('Invalid product ID', details=product_result.error)
        if not variant_result.success:
            raise ValidationError('Invalid variant ID', details=variant_result.error)

        product = product_result.data or {}
        variant = variant_result.data or {}
        return {
            'product_title': product.get('title'),
            'variant_title': variant.get('title'),
            'price': variant.get('price'),
        }

    async def _attach_checkout(
        self, booking_order: BookingOrder, *, is_strict: bool
    ) -> BookingOrder:
        checkout = await self.commerce_gateway.create_checkout(booking_order=booking_order)
        if checkout.success:
            return booking_order.with_checkout(
                checkout_id=checkout.checkout_id, checkout_url=checkout.checkout_url
            )

        if is_strict:
            raise GatewayError('Failed to create Shopify checkout', details=checkout.error)
        Logger.base.warning(
            f'⚠️ [Booking] Checkout failed ({checkout.failure_kind}), '
            f'continuing without checkout: {checkout.error}'
        )
        return booking_order
