from abc import ABC, abstractmethod
from typing import Any, Optional

from src.service.booking.app.dto.gateway_result import GatewayFailureKind, GatewayResult


class CatalogReader(ABC):
    """Read-only product/variant lookups, normalized to the admin REST shape"""

    @abstractmethod
    async def get_product(self, *, product_id: int) -> GatewayResult:
        pass

    @abstractmethod
    async def get_variant(self, *, variant_id: int) -> GatewayResult:
        pass

    @abstractmethod
    async def get_all_products(self) -> GatewayResult:
        pass


def not_found_details(resource: str, resource_id: int) -> str:
    return (
        f'{resource} with ID "{resource_id}" not found in Shopify store. '
        'Please verify the ID exists and is active in your Shopify admin.'
    )


def lookup_failure(
    result: GatewayResult, *, resource: str, resource_id: int
) -> GatewayResult:
    """Reword a failed single-item lookup; a 404 names the missing id"""
    status: Optional[Any] = result.status_code
    if status == 404:
        details = not_found_details(resource, resource_id)
        status_label = '404 Not Found'
    else:
        details = result.error or 'Unknown error'
        status_label = str(status) if status is not None else (result.failure_kind or 'Unknown')
    return GatewayResult.fail(
        result.failure_kind or GatewayFailureKind.HTTP,
        f'Received an error response ({status_label}) from Shopify: "{details}"',
        status_code=result.status_code,
    )
