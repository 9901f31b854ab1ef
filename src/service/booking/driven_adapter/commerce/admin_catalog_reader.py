from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import GatewayFailureKind, GatewayResult
from src.service.booking.driven_adapter.commerce.catalog_reader import CatalogReader, lookup_failure
from src.service.booking.driven_adapter.commerce.shopify_http_client import ShopifyHttpClient


class AdminCatalogReader(CatalogReader):
    def __init__(self, *, http_client: ShopifyHttpClient, access_token: str) -> None:
        self.http_client = http_client
        self._access_token = access_token

    async def _get(self, path: str) -> GatewayResult:
        return await self.http_client.rest_request(
            'GET', path, access_token=self._access_token
        )

    @Logger.io
    async def get_product(self, *, product_id: int) -> GatewayResult:
        result = await self._get(f'products/{product_id}')
        if not result.success:
            return lookup_failure(result, resource='Product', resource_id=product_id)
        return GatewayResult.ok((result.data or {}).get('product'), status_code=result.status_code)

    @Logger.io
    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        result = await self._get(f'variants/{variant_id}')
        if not result.success:
            return lookup_failure(result, resource='Variant', resource_id=variant_id)
        return GatewayResult.ok((result.data or {}).get('variant'), status_code=result.status_code)

    @Logger.io
    async def get_all_products(self) -> GatewayResult:
        # First page only; the admin API returns up to 250 products per request
        result = await self._get('products?status=active&limit=250')
        if not result.success:
            status_label = (
                result.status_code if result.status_code is not None else result.failure_kind
            )
            return GatewayResult.fail(
                result.failure_kind or GatewayFailureKind.HTTP,
                f'Received an error response ({status_label}) from Shopify: "{result.error}"',
                status_code=result.status_code,
            )
        return GatewayResult.ok(
            (result.data or {}).get('products') or [], status_code=result.status_code
        )
