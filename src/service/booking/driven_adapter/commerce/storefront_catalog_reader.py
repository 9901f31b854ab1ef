from typing import Any, Optional

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import GatewayFailureKind, GatewayResult
from src.service.booking.driven_adapter.commerce.catalog_reader import (
    CatalogReader,
    not_found_details,
)
from src.service.booking.driven_adapter.commerce.shopify_http_client import ShopifyHttpClient
from src.service.booking.driven_adapter.commerce.shopify_id import from_global_id, to_global_id


_VARIANT_FIELDS = """
  id
  title
  sku
  quantityAvailable
  price { amount }
"""

_PRODUCT_FIELDS = f"""
  id
  title
  handle
  vendor
  productType
  createdAt
  updatedAt
  variants(first: 100) {{
    edges {{ node {{ {_VARIANT_FIELDS} }} }}
  }}
"""

PRODUCT_QUERY = f"""
query product($id: ID!) {{
  node(id: $id) {{
    ... on Product {{ {_PRODUCT_FIELDS} }}
  }}
}}
"""

VARIANT_QUERY = f"""
query variant($id: ID!) {{
  node(id: $id) {{
    ... on ProductVariant {{
      {_VARIANT_FIELDS}
      product {{ id }}
    }}
  }}
}}
"""

PRODUCTS_QUERY = f"""
query products($first: Int!) {{
  products(first: $first) {{
    edges {{ node {{ {_PRODUCT_FIELDS} }} }}
  }}
}}
"""

STOREFRONT_PAGE_SIZE = 250


def normalize_variant(node: dict[str, Any], product_id: Optional[int] = None) -> dict[str, Any]:
    price = (node.get('price') or {}).get('amount')
    return {
        'id': from_global_id(node.get('id')),
        'product_id': product_id or from_global_id((node.get('product') or {}).get('id')),
        'title': node.get('title'),
        'price': price,
        'sku': node.get('sku') or '',
        'inventory_quantity': node.get('quantityAvailable') or 0,
    }


def normalize_product(node: dict[str, Any]) -> dict[str, Any]:
    product_id = from_global_id(node.get('id'))
    edges = (node.get('variants') or {}).get('edges') or []
    return {
        'id': product_id,
        'title': node.get('title'),
        'handle': node.get('handle'),
        # the storefront only exposes published products
        'status': 'active',
        'vendor': node.get('vendor'),
        'product_type': node.get('productType'),
        'created_at': node.get('createdAt'),
        'updated_at': node.get('updatedAt'),
        'variants': [normalize_variant(edge['node'], product_id) for edge in edges],
    }


class StorefrontCatalogReader(CatalogReader):
    def __init__(self, *, http_client: ShopifyHttpClient, storefront_token: str) -> None:
        self.http_client = http_client
        self._storefront_token = storefront_token

    async def _node(self, query: str, global_id: str) -> GatewayResult:
        return await self.http_client.graphql_request(
            query, {'id': global_id}, storefront_token=self._storefront_token
        )

    @staticmethod
    def _missing(resource: str, resource_id: int) -> GatewayResult:
        return GatewayResult.fail(
            GatewayFailureKind.GRAPHQL,
            f'Received an error response (404 Not Found) from Shopify: '
            f'"{not_found_details(resource, resource_id)}"',
            status_code=404,
        )

    @Logger.io
    async def get_product(self, *, product_id: int) -> GatewayResult:
        result = await self._node(PRODUCT_QUERY, to_global_id('Product', product_id))
        if not result.success:
            return result
        node = (result.data or {}).get('node')
        if not node or not node.get('id'):
            return self._missing('Product', product_id)
        return GatewayResult.ok(normalize_product(node), status_code=result.status_code)

    @Logger.io
    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        result = await self._node(VARIANT_QUERY, to_global_id('ProductVariant', variant_id))
        if not result.success:
            return result
        node = (result.data or {}).get('node')
        if not node or not node.get('id'):
            return self._missing('Variant', variant_id)
        return GatewayResult.ok(normalize_variant(node), status_code=result.status_code)

    @Logger.io
    async def get_all_products(self) -> GatewayResult:
        result = await self.http_client.graphql_request(
            PRODUCTS_QUERY,
            {'first': STOREFRONT_PAGE_SIZE},
            storefront_token=self._storefront_token,
        )
        if not result.success:
            return result
        edges = ((result.data or {}).get('products') or {}).get('edges') or []
        return GatewayResult.ok(
            [normalize_product(edge['node']) for edge in edges], status_code=result.status_code
        )
