from typing import Optional

import httpx

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import (
    NOT_CONFIGURED_MESSAGE,
    CheckoutResult,
    GatewayFailureKind,
    GatewayResult,
)
from src.service.booking.app.interface.i_checkout_creator import ICheckoutCreator
from src.service.booking.app.interface.i_commerce_gateway import ICommerceGateway
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.driven_adapter.commerce.admin_catalog_reader import AdminCatalogReader
from src.service.booking.driven_adapter.commerce.catalog_reader import CatalogReader
from src.service.booking.driven_adapter.commerce.rest_checkout_creator import RestCheckoutCreator
from src.service.booking.driven_adapter.commerce.shopify_http_client import ShopifyHttpClient
from src.service.booking.driven_adapter.commerce.storefront_cart_creator import (
    StorefrontCartCreator,
)
from src.service.booking.driven_adapter.commerce.storefront_catalog_reader import (
    StorefrontCatalogReader,
)


class ShopifyCommerceGateway(ICommerceGateway):
    def __init__(
        self, *, checkout_creator: ICheckoutCreator, catalog_reader: CatalogReader
    ) -> None:
        self.checkout_creator = checkout_creator
        self.catalog_reader = catalog_reader

    def is_configured(self) -> bool:
        return True

    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        return await self.checkout_creator.create_checkout(booking_order=booking_order)

    async def get_product(self, *, product_id: int) -> GatewayResult:
        return await self.catalog_reader.get_product(product_id=product_id)

    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        return await self.catalog_reader.get_variant(variant_id=variant_id)

    async def get_all_products(self) -> GatewayResult:
        return await self.catalog_reader.get_all_products()


class UnconfiguredCommerceGateway(ICommerceGateway):
    """Stands in when credentials are missing; never opens a connection"""

    @staticmethod
    def _failure() -> GatewayResult:
        return GatewayResult.fail(GatewayFailureKind.NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)

    def is_configured(self) -> bool:
        return False

    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        return CheckoutResult.from_failure(self._failure())

    async def get_product(self, *, product_id: int) -> GatewayResult:
        return self._failure()

    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        return self._failure()

    async def get_all_products(self) -> GatewayResult:
        return self._failure()


def build_commerce_gateway(
    settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None
) -> ICommerceGateway:
    """
    Pick the checkout style from configuration

    - store URL + admin access token: REST checkout, admin catalog
    - store URL + storefront token: GraphQL cart, storefront catalog
    - anything else: unconfigured
    The admin token wins when both tokens are set.
    """
    if not settings.SHOPIFY_STORE_URL:
        Logger.base.warning('⚠️ [Shopify] Store URL not set, checkout disabled')
        return UnconfiguredCommerceGateway()

    http_client = ShopifyHttpClient(
        store_url=settings.SHOPIFY_STORE_URL,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout_seconds=settings.SHOPIFY_TIMEOUT_SECONDS,
        transport=transport,
    )

    if settings.SHOPIFY_ACCESS_TOKEN and settings.SHOPIFY_ACCESS_TOKEN.get_secret_value():
        access_token = settings.SHOPIFY_ACCESS_TOKEN.get_secret_value()
        Logger.base.info(f'🛒 [Shopify] Admin REST checkout for {settings.SHOPIFY_STORE_URL}')
        return ShopifyCommerceGateway(
            checkout_creator=RestCheckoutCreator(
                http_client=http_client, access_token=access_token
            ),
            catalog_reader=AdminCatalogReader(http_client=http_client, access_token=access_token),
        )

    if settings.SHOPIFY_STOREFRONT_TOKEN and settings.SHOPIFY_STOREFRONT_TOKEN.get_secret_value():
        storefront_token = settings.SHOPIFY_STOREFRONT_TOKEN.get_secret_value()
        Logger.base.info(f'🛒 [Shopify] Storefront cart checkout for {settings.SHOPIFY_STORE_URL}')
        return ShopifyCommerceGateway(
            checkout_creator=StorefrontCartCreator(
                http_client=http_client, storefront_token=storefront_token
            ),
            catalog_reader=StorefrontCatalogReader(
                http_client=http_client, storefront_token=storefront_token
            ),
        )

    Logger.base.warning('⚠️ [Shopify] No access token set, checkout disabled')
    return UnconfiguredCommerceGateway()
