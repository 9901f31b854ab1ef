from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import CheckoutResult, GatewayFailureKind
from src.service.booking.app.interface.i_checkout_creator import ICheckoutCreator
from src.service.booking.domain.entity.booking_order_entity import BookingOrder
from src.service.booking.driven_adapter.commerce.checkout_attributes import build_custom_attributes
from src.service.booking.driven_adapter.commerce.shopify_http_client import ShopifyHttpClient
from src.service.booking.driven_adapter.commerce.shopify_id import to_global_id


CART_CREATE_MUTATION = """
mutation cartCreate($input: CartInput!) {
  cartCreate(input: $input) {
    cart {
      id
      checkoutUrl
    }
    userErrors {
      field
      message
    }
  }
}
"""


class StorefrontCartCreator(ICheckoutCreator):
    """Storefront GraphQL checkout: a cart whose checkoutUrl is the hosted checkout"""

    def __init__(self, *, http_client: ShopifyHttpClient, storefront_token: str) -> None:
        self.http_client = http_client
        self._storefront_token = storefront_token

    @staticmethod
    def build_variables(booking_order: BookingOrder) -> dict:
        return {
            'input': {
                'lines': [
                    {
                        'merchandiseId': to_global_id('ProductVariant', booking_order.variant_id),
                        'quantity': booking_order.quantity or 1,
                    }
                ],
                'attributes': build_custom_attributes(booking_order),
                'buyerIdentity': {
                    'email': booking_order.email,
                    'phone': booking_order.phone_number,
                },
            }
        }

    @Logger.io
    async def create_checkout(self, *, booking_order: BookingOrder) -> CheckoutResult:
        result = await self.http_client.graphql_request(
            CART_CREATE_MUTATION,
            self.build_variables(booking_order),
            storefront_token=self._storefront_token,
        )
        if not result.success:
            Logger.base.error(f'[Shopify] Cart creation failed: {result.error}')
            return CheckoutResult.from_failure(result)

        payload = (result.data or {}).get('cartCreate') or {}
        user_errors = payload.get('userErrors') or []
        if user_errors:
            error = '; '.join(user_error.get('message', '') for user_error in user_errors)
            Logger.base.error(f'[Shopify] Cart creation rejected: {error}')
            return CheckoutResult(
                success=False, error=error, failure_kind=GatewayFailureKind.GRAPHQL
            )

        cart = payload.get('cart') or {}
        if not cart.get('checkoutUrl'):
            return CheckoutResult(
                success=False,
                error='Cart response is missing checkoutUrl',
                failure_kind=GatewayFailureKind.DECODE,
            )
        return CheckoutResult(
            success=True,
            checkout_id=cart.get('id'),
            checkout_url=cart['checkoutUrl'],
        )
