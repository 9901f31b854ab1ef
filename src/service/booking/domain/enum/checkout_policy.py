from enum import StrEnum


class CheckoutPolicy(StrEnum):
    """How a booking reacts when the commerce checkout cannot be created"""

    LENIENT = 'lenient'  # keep the booking, checkout fields stay null
    STRICT = 'strict'  # verify product/variant first, fail the booking on checkout error
