"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import (
    create_booking_use_case,
    create_date_range_use_case,
    delete_date_range_use_case,
    delete_order_use_case,
    update_booking_status_use_case,
    update_date_range_use_case,
    upsert_product_use_case,
)
from src.service.booking.app.query import (
    export_orders_use_case,
    get_booking_use_case,
    get_order_stats_use_case,
    list_bookings_use_case,
    list_catalog_products_use_case,
    list_date_ranges_use_case,
    list_orders_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    update_booking_status_use_case,
    delete_order_use_case,
    upsert_product_use_case,
    create_date_range_use_case,
    update_date_range_use_case,
    delete_date_range_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    list_orders_use_case,
    get_order_stats_use_case,
    export_orders_use_case,
    list_catalog_products_use_case,
    list_date_ranges_use_case,
]
