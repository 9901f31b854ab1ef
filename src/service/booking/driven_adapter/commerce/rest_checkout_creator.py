from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import CheckoutResult, GatewayFailureKind
from src.service.booking.app.interface.i_checkout_creator import ICheckoutCreator
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.driven_adapter.commerce.checkout_attributes import build_custom_attributes
from src.service.booking.driven_adapter.commerce.shopify_http_client import ShopifyHttpClient


class RestCheckoutCreator(ICheckoutCreator):
    """Admin REST checkout: POST /admin/api/{version}/checkouts.json"""

    def __init__(self, *, http_client: ShopifyHttpClient, access_token: str) -> None:
        self.http_client = http_client
        self._access_token = access_token

    @staticmethod
    def build_payload(booking_order: BookingOrder) -> dict:
        return {
            'checkout': {
                'line_items': [
                    {
                        'variant_id': booking_order.variant_id,
                        'quantity': booking_order.quantity or 1,
                    }
                ],
                'custom_attributes': build_custom_attributes(booking_order),
                'email': booking_order.email,
            }
        }

    @Logger.io
    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        result = await self.http_client.rest_request(
            'POST',
            'checkouts',
            access_token=self._access_token,
            payload=self.build_payload(booking_order),
        )
        if not result.success:
            Logger.base.error(f'[Shopify] Checkout creation failed: {result.error}')
            return CheckoutResult.from_failure(result)

        checkout = (result.data or {}).get('checkout') or {}
        if not checkout.get('web_url'):
            return CheckoutResult(
                success=False,
                error='Checkout response is missing web_url',
                failure_kind=GatewayFailureKind.DECODE,
            )
        return CheckoutResult(
            success=True,
            checkout_id=str(checkout['id']) if checkout.get('id') is not None else None,
            checkout_url=checkout['web_url'],
            checkout_token=checkout.get('token'),
        )
