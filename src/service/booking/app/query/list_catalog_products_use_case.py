from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import GatewayError, NotConfiguredError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_commerce_gateway import ICommerceGateway
from src.service.booking.app.interface.i_date_range_query_repo import IDateRangeQueryRepo


NO_ACTIVE_PRODUCTS_MESSAGE = 'No active products found in Shopify store'

EMPTY_DATE_STATS: dict[str, Any] = {
    'total_ranges': 0,
    'active_ranges': 0,
    'total_available_seats': 0,
    'total_booked_seats': 0,
    'earliest_date': None,
    'latest_date': None,
}


def _shopify_summary(product: dict[str, Any]) -> dict[str, Any]:
    return {
        'id': product.get('id'),
        'handle': product.get('handle'),
        'status': product.get('status'),
        'vendor': product.get('vendor'),
        'product_type': product.get('product_type'),
        'created_at': product.get('created_at'),
        'updated_at': product.get('updated_at'),
    }


def merge_catalog_rows(
    products: list[dict[str, Any]], date_stats: dict[int, dict[str, Any]]
) -> list[dict[str, Any]]:
    """
    Flatten catalog products into one row per variant, each carrying the
    product's date range statistics. A product without variants yields one
    synthetic variant whose id is the product id.
    """
    rows: list[dict[str, Any]] = []
    for product in products:
        stats = date_stats.get(product.get('id'), EMPTY_DATE_STATS)  # type: ignore[arg-type]
        summary = _shopify_summary(product)
        variants = product.get('variants') or []

        if not variants:
            variants = [{'id': product.get('id'), 'title': None, 'price': None}]

        for variant in variants:
            rows.append(
                {
                    'product_id': product.get('id'),
                    'variant_id': variant.get('id'),
                    'product_name': product.get('title'),
                    'variant_name': variant.get('title') or 'Default',
                    'price': variant.get('price') or '0.00',
                    'sku': variant.get('sku') or '',
                    'inventory_quantity': variant.get('inventory_quantity') or 0,
                    **stats,
                    'shopify_product': summary,
                }
            )
    return rows


class ListCatalogProductsUseCase:
    """Active catalog products from Shopify merged with local date range statistics"""

    def __init__(
        self,
        *,
        commerce_gateway: ICommerceGateway,
        date_range_query_repo: IDateRangeQueryRepo,
    ) -> None:
        self.commerce_gateway = commerce_gateway
        self.date_range_query_repo = date_range_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        commerce_gateway: ICommerceGateway = Depends(Provide[Container.commerce_gateway]),
        date_range_query_repo: IDateRangeQueryRepo = Depends(
            Provide[Container.date_range_query_repo]
        ),
    ) -> Self:
        return cls(commerce_gateway=commerce_gateway, date_range_query_repo=date_range_query_repo)

    @Logger.io
    async def list_products(self) -> dict[str, Any]:
        if not self.commerce_gateway.is_configured():
            raise NotConfiguredError(
                'Shopify is not configured. Please set SHOPIFY_STORE_URL and '
                'SHOPIFY_ACCESS_TOKEN (or SHOPIFY_STOREFRONT_TOKEN)'
            )

        result = await self.commerce_gateway.get_all_products()
        if not result.success:
            raise GatewayError('Failed to fetch products from Shopify', details=result.error)

        products = [
            product for product in (result.data or []) if product.get('status') == 'active'
        ]
        if not products:
            return {'data': [], 'count': 0, 'message': NO_ACTIVE_PRODUCTS_MESSAGE}

        date_stats = await self.date_range_query_repo.get_stats_by_product(
            product_ids=[product['id'] for product in products if product.get('id') is not None]
        )
        rows = merge_catalog_rows(products, date_stats)
        return {'data': rows, 'count': len(rows), 'source': 'shopify'}
